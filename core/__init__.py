# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the data logic for the Statistics Canada agent:
# the curated catalogue, the WDS fetcher, the response normalizer, the
# sample fallback tables and the three request handlers that compose them.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  Every module here is plain Python plus the standard library,
#   so it can be tested without an agent, a server, or (with the fetcher
#   stubbed) the internet.
# =============================================================================
