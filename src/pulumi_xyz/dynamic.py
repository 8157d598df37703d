"""
Todo resource backed by an in-process dynamic provider.

`DynamicTodo` manages the same backend object as `Todo` without a provider
plugin: the Pulumi engine runs `XyzResourceProvider` inside the language host.
"""

from typing import Optional

import pulumi
import pulumi.dynamic

from pulumi_xyz.errors import MissingRequiredPropertyError
from pulumi_xyz.provider.provider import XyzResourceProvider
from pulumi_xyz.todo import TODO_TYPE, TodoArgs


class DynamicTodo(pulumi.dynamic.Resource):
    completed: pulumi.Output[bool]
    order: pulumi.Output[int]
    title: pulumi.Output[str]
    url: pulumi.Output[str]

    def __init__(
        self,
        resource_name: str,
        args: TodoArgs,
        opts: Optional[pulumi.ResourceOptions] = None,
        provider: Optional[XyzResourceProvider] = None,
    ):
        if args is None or args.title is None:
            raise MissingRequiredPropertyError("title")

        props = {
            "completed": args.completed,
            "order": args.order,
            "title": args.title,
            "url": args.url,
        }
        super().__init__(
            provider or XyzResourceProvider.for_resource(TODO_TYPE),
            resource_name,
            props,
            opts,
        )
