"""Pipeline stages: scan, parse, plan, validate and execute."""
