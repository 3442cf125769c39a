"""Remote List CLI entry point."""

from remote_list.cli import main

if __name__ == "__main__":
    main()
