from graphql_depth_limit.extensions.depth_limiter import QueryDepthLimiter

__all__ = ["QueryDepthLimiter"]
