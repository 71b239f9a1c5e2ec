#!/usr/bin/env python3
"""
Vault - Entry point script

Run the REPL:
    python -m vault

Or use as a library:
    from vault import parse_statement
    parse_statement('INSERT (1,"alice")')
"""

from vault.core.repl import main

if __name__ == '__main__':
    main()
