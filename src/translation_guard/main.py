from translation_guard.infrastructure.entrypoints.cli.translation_check_cli import main

if __name__ == "__main__":
    main()
