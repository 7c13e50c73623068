"""
Source code root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, errors and middleware
- services/  : Business logic for fleet, employees, tours and AI helpers
- llm/       : LLM integration and prompt management
- database/  : PostgreSQL and MongoDB access
- analytics/ : Fleet summaries computed with pandas
- geo/       : Distance, airport and polyline utilities
- models/    : Pydantic models for request/response schemas
"""
