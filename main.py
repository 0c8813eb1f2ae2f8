# main.py
#!/usr/bin/env python3
"""
Legacy runner - uses the CLI from a source checkout
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from ember.cli.main import cli

if __name__ == "__main__":
    # If no arguments, show help
    if len(sys.argv) == 1:
        sys.argv.append('--help')

    # Support legacy: main.py filename.em → main.py run filename.em
    if len(sys.argv) == 2 and sys.argv[1].endswith('.em'):
        sys.argv.insert(1, 'run')

    cli()
