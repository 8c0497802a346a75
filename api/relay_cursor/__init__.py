"""Relay cursor connections over keyset-paginated collections."""
