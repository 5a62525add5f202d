"""Trails - a desktop frontend for the Legendary Epic Games Store client."""
