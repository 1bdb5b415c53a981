"""Notification delivery service with durable history and live push."""
