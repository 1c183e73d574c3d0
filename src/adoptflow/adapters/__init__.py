"""Adapters – RabbitMQ, SQLAlchemy and Redis implementations of the ports."""
