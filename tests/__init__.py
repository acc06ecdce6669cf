"""Tests for the book catalog."""
