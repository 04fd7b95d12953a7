"""
Entry Point Script (Bootstrap)
==============================
Runs the command-line tool straight from a source checkout.

It is located outside the 'src' package and modifies 'sys.path' so that
'from engimath...' resolves without installing the package.

Usage:
    $ python run.py matrix-product --dim 2 "2,0,0,3" "4,5"
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from engimath.main import run

if __name__ == "__main__":
    run()
