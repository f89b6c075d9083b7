"""Utility helpers for boundcache."""
