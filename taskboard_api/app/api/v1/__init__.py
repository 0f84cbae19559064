"""Version 1 of the Taskboard API."""
