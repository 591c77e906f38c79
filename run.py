# =============================================================================
# File: run.py
# Purpose: Entry point for development. Same as the `account-demo` script.
#   python run.py <username> <password> <database>
# =============================================================================
# run.py
from accountdemo.cli import main

if __name__ == "__main__":
    main()
