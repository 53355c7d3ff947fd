"""Enumerations for signal levels, insight types and data-source kinds."""
