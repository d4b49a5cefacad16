"""fiso - directory inventory and file sorting tool."""
