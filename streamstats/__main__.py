"""Allow ``python -m streamstats``."""

from streamstats.aggregator.cli import main

if __name__ == "__main__":
    main()
