"""
Scripts package for the LinkedIn leads tools.

These scripts are standalone executables that can be run directly:
- dedupe_leads.py: Export new-file rows whose LinkedIn profile isn't in the master file
- scrape_google.py: Collect LinkedIn profile links from Google search results
- export_profiles.py: Save the collected profiles to CSV
"""
