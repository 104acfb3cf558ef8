"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions, value objects and the lifecycle event model
- Lifecycle event routing and the RabbitMQ consumer
- Middleware, metrics and tracing
"""
