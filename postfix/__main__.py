"""
Allows `py -m postfix input 3 4 +` and friends.
"""
from .cmdline import main

main()
