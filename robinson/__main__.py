"""
Lets you say:

    py -m robinson "(let x = 1 in x)"

which does the same as the installed "robinson" command.
"""
from .cmdline import main

main()
