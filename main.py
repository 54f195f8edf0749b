"""Entry point for the wolcast command line.
Run: python main.py -m aa:bb:cc:dd:ee:ff -b 255.255.255.255
"""
from wolcast.cli import main

if __name__ == "__main__":
    main()
