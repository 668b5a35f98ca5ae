# PDFNup/main.py

import sys
import os

# This line ensures that Python finds the pdfnup package when run from a checkout
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from pdfnup.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
