"""Scenario DSL: YAML loading and compact edge notation."""
