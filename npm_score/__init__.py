"""Score reports for npm packages from the npms.io service."""
