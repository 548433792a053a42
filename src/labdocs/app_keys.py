"""Application keys for type-safe app configuration access."""

from aiohttp import web

from labdocs.config import Config
from labdocs.core.documents import DocumentStore
from labdocs.core.renderer import MarkdownRenderer

config_key = web.AppKey("config", Config)
store_key = web.AppKey("store", DocumentStore)
renderer_key = web.AppKey("renderer", MarkdownRenderer)
