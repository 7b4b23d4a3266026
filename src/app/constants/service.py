"""Identificação do serviço."""

SERVICE_NAME = "WhatsApp Gateway"
SERVICE_VERSION = "1.0.0"
