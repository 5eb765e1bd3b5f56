"""Client library for the Pivotal Tracker v3 XML API."""
