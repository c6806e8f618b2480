"""HTTP + JSON transport: resources, envelopes, client, and executor."""

from wd_remote.remote.client import HttpClient as HttpClient
from wd_remote.remote.executor import Executor as Executor
from wd_remote.remote.messages import HttpRequest as HttpRequest
from wd_remote.remote.messages import HttpResponse as HttpResponse
from wd_remote.remote.paths import build_path as build_path
from wd_remote.remote.resources import DEFAULT_RESOURCES as DEFAULT_RESOURCES
