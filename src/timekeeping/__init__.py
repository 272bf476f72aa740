"""Timekeeping service package.

Organized by feature modules (records, reports, messenger) with a thin Flask
controller layer over service/repository layers.
"""
