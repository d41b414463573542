"""`bookiescrape` resolves sportsbook scraping configuration into workbook layouts."""

__version__ = "0.1.0"
