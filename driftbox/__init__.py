"""Keyboard-driven rectangle demo."""
