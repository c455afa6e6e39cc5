"""SQLite persistence for the SQL-backed user repository."""
