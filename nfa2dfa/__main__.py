import sys

from nfa2dfa.cli import main

sys.exit(main())
