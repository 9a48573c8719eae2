"""Prefect flows for scheduled weather refreshes."""
