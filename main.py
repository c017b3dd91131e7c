# main.py
import sys

from road_raster.app.cli import main

if __name__ == "__main__":
    sys.exit(main())
