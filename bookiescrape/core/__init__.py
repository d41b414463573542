"""Core plumbing shared by BookieScrape modules: errors and logging."""
