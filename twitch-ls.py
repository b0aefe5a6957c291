#!/usr/bin/env python3
from twitch.cli import main

if __name__ == '__main__':
    main()
