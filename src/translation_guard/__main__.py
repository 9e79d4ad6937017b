from translation_guard.main import main

main()
