"""
Helpers shared by the resource bindings: default version, default resource
options and constructor argument dispatch.
"""

from importlib import metadata as importlib_metadata
from typing import Any, Optional, Tuple, Type, TypeVar

import pulumi

from pulumi_xyz.config.environment import Environment
from pulumi_xyz.config.logging_config import get_logger

log = get_logger(__name__)

DISTRIBUTION_NAME = "pulumi-xyz"
FALLBACK_VERSION = "0.0.0"

_version: Optional[str] = None

T = TypeVar("T")
O = TypeVar("O")


def set_version(version: Optional[str]) -> None:
    """
    Set the provider version injected into every resource that doesn't pin one.

    Call once at program startup; passing None restores lookup from package metadata.
    """
    global _version
    _version = version


def get_version() -> str:
    """
    Return the provider version to request from the engine.

    Resolution order: `set_version()`, the installed distribution's version,
    `PULUMI_XYZ_VERSION`, then a fixed fallback.
    """
    if _version:
        return _version
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        log.debug("Distribution %s is not installed", DISTRIBUTION_NAME)
    return Environment.get_version() or FALLBACK_VERSION


def get_resource_opts_defaults() -> pulumi.ResourceOptions:
    return pulumi.ResourceOptions(version=get_version())


def get_resource_args_opts(
    resource_args_type: Type[T],
    resource_options_type: Type[O],
    *args: Any,
    **kwargs: Any,
) -> Tuple[Optional[T], Optional[O]]:
    """
    Return the resource args and options given the *args and **kwargs of a
    resource's __init__ method.
    """
    resource_args, opts = None, None

    if args and isinstance(args[0], resource_args_type):
        resource_args, args = args[0], args[1:]

    if args and isinstance(args[0], resource_options_type):
        opts = args[0]

    if resource_args is None:
        a = kwargs.get("args")
        if isinstance(a, resource_args_type):
            resource_args = a

    if opts is None:
        opts = kwargs.get("opts")

    return resource_args, opts
