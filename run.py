#!/usr/bin/env python3
"""
batchresize entry point.

Resize every image in a folder with:

    python run.py --width 800 --height 600

or pick the folders explicitly:

    python run.py --input input_images --output output_images --width 800 --height 600

Run `python run.py --help` for all flags. Defaults live in config.yaml.
"""

import sys

from batchresize.cli import main


if __name__ == "__main__":
    sys.exit(main())
