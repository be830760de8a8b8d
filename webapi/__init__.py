"""Northwind Orders REST API."""
