"""Pydantic schemas for WhatsApp Cloud API payloads."""
