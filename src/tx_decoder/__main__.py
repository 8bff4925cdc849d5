#! /usr/bin/env python3

from . import main

if __name__ == "__main__":
    main()
