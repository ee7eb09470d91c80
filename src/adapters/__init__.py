"""Sinks de salida y exportadores concretos."""
