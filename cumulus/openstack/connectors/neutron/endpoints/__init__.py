"""Neutron endpoint specs."""
