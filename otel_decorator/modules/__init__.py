"""Feature modules for otel-decorator.

Each module is self-contained with its own schemas, exceptions and
services: ``trace`` holds the decorator and its attribute resolution,
``metadata`` the grouped logger metadata helpers.
"""
