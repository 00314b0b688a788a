"""Entry point for running the YouTrack client CLI."""

from youtrack_client import main

if __name__ == "__main__":
    main()
