"""Entry point for running the FogBugz connector command line."""

from fogbugz_connector import main

if __name__ == "__main__":
    main()
