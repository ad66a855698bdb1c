import sys

from agent_network.cli import main

if __name__ == "__main__":
    sys.exit(main())
