import sys

from aircraft_encryptor.cli import main


if __name__ == "__main__":
    sys.exit(main())
