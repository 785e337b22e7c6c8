from app.models.post import Post  # noqa: F401  registers the mapper on Base.metadata
