"""Polaris role explorer: role map layout and role detail page navigation."""
