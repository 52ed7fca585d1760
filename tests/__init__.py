"""Tests for izone."""
