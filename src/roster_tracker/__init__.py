"""Roster tracker package.

Member roster, per-date attendance and dashboard statistics for a single
organization, organized by feature modules (members, attendance, insights,
access) with a thin Flask controller layer over service/repository layers.
"""
