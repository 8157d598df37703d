"""
The Todo resource: one item on the backend's to-do list.

`Todo` only describes the resource to the Pulumi engine. Registration,
diffing and reconciliation happen in the engine and the xyz provider.
"""

from typing import Any, ClassVar, Optional, overload

import pulumi

from pulumi_xyz import _utilities
from pulumi_xyz.config.logging_config import get_logger
from pulumi_xyz.errors import MissingRequiredPropertyError

log = get_logger(__name__)

TODO_TYPE = "xyz:index:Todo"

__all__ = ["TODO_TYPE", "TodoArgs", "Todo"]


@pulumi.input_type
class TodoArgs:
    def __init__(
        __self__,
        *,
        title: pulumi.Input[str],
        completed: Optional[pulumi.Input[bool]] = None,
        order: Optional[pulumi.Input[int]] = None,
        url: Optional[pulumi.Input[str]] = None,
    ):
        """
        The set of arguments for constructing a Todo resource.

        :param title: What needs to be done.
        :param completed: Whether the todo is done.
        :param order: Position in the list.
        :param url: Canonical URL of the todo.
        """
        pulumi.set(__self__, "title", title)
        if completed is not None:
            pulumi.set(__self__, "completed", completed)
        if order is not None:
            pulumi.set(__self__, "order", order)
        if url is not None:
            pulumi.set(__self__, "url", url)

    @property
    @pulumi.getter
    def title(self) -> pulumi.Input[str]:
        return pulumi.get(self, "title")

    @title.setter
    def title(self, value: pulumi.Input[str]):
        pulumi.set(self, "title", value)

    @property
    @pulumi.getter
    def completed(self) -> Optional[pulumi.Input[bool]]:
        return pulumi.get(self, "completed")

    @completed.setter
    def completed(self, value: Optional[pulumi.Input[bool]]):
        pulumi.set(self, "completed", value)

    @property
    @pulumi.getter
    def order(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "order")

    @order.setter
    def order(self, value: Optional[pulumi.Input[int]]):
        pulumi.set(self, "order", value)

    @property
    @pulumi.getter
    def url(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "url")

    @url.setter
    def url(self, value: Optional[pulumi.Input[str]]):
        pulumi.set(self, "url", value)


class Todo(pulumi.CustomResource):
    resource_type_token: ClassVar[str] = TODO_TYPE

    @overload
    def __init__(
        __self__,
        resource_name: str,
        opts: Optional[pulumi.ResourceOptions] = None,
        completed: Optional[pulumi.Input[bool]] = None,
        order: Optional[pulumi.Input[int]] = None,
        title: Optional[pulumi.Input[str]] = None,
        url: Optional[pulumi.Input[str]] = None,
        __props__=None,
    ):
        ...

    @overload
    def __init__(
        __self__,
        resource_name: str,
        args: TodoArgs,
        opts: Optional[pulumi.ResourceOptions] = None,
    ):
        ...

    def __init__(__self__, resource_name: str, *args, **kwargs):
        """
        Create a Todo resource with the given unique name, arguments, and options.

        :param str resource_name: The unique name of the resource.
        :param TodoArgs args: The arguments to use to populate this resource's properties.
        :param pulumi.ResourceOptions opts: Options for the resource. `id` attaches to an
               existing todo instead of creating one; `urn` lifts the `title` requirement.

        :raises MissingRequiredPropertyError: `title` is missing and neither `id` nor `urn` is set.
        """
        resource_args, opts = _utilities.get_resource_args_opts(
            TodoArgs, pulumi.ResourceOptions, *args, **kwargs
        )
        if resource_args is not None:
            __self__._internal_init(resource_name, opts, **resource_args.__dict__)
        else:
            __self__._internal_init(resource_name, *args, **kwargs)

    def _internal_init(
        __self__,
        resource_name: str,
        opts: Optional[pulumi.ResourceOptions] = None,
        completed: Optional[pulumi.Input[bool]] = None,
        order: Optional[pulumi.Input[int]] = None,
        title: Optional[pulumi.Input[str]] = None,
        url: Optional[pulumi.Input[str]] = None,
        __props__=None,
    ):
        opts = pulumi.ResourceOptions.merge(_utilities.get_resource_opts_defaults(), opts)
        if not isinstance(opts, pulumi.ResourceOptions):
            raise TypeError("Expected resource options to be a ResourceOptions instance")
        if opts.id is None:
            if __props__ is not None:
                raise TypeError(
                    "__props__ is only valid when passed in combination with a valid opts.id to get an existing resource"
                )
            __props__ = TodoArgs.__new__(TodoArgs)

            __props__.__dict__["completed"] = completed
            __props__.__dict__["order"] = order
            if title is None and not opts.urn:
                raise MissingRequiredPropertyError("title")
            __props__.__dict__["title"] = title
            __props__.__dict__["url"] = url
        elif __props__ is None:
            # filled in by the engine from the live resource
            __props__ = TodoArgs.__new__(TodoArgs)
            __props__.__dict__["completed"] = None
            __props__.__dict__["order"] = None
            __props__.__dict__["title"] = None
            __props__.__dict__["url"] = None

        log.debug("Registering %s %r (version %s)", TODO_TYPE, resource_name, opts.version)
        super(Todo, __self__).__init__(TODO_TYPE, resource_name, __props__, opts)

    @staticmethod
    def get(
        resource_name: str,
        id: pulumi.Input[str],
        opts: Optional[pulumi.ResourceOptions] = None,
    ) -> "Todo":
        """
        Get an existing Todo resource's state with the given name and id.

        :param str resource_name: The unique name of the resulting resource.
        :param pulumi.Input[str] id: The unique provider ID of the resource to lookup.
        :param pulumi.ResourceOptions opts: Options for the resource; any `id` is replaced.
        """
        opts = pulumi.ResourceOptions.merge(opts, pulumi.ResourceOptions(id=id))
        return Todo(resource_name, opts=opts)

    @staticmethod
    def is_instance(obj: Any) -> bool:
        """
        Returns True if the given object is a Todo. The type token is compared by
        value, so instances created by another copy of this module also match.
        """
        if obj is None:
            return False
        return getattr(obj, "resource_type_token", None) == Todo.resource_type_token

    @property
    @pulumi.getter
    def completed(self) -> pulumi.Output[bool]:
        return pulumi.get(self, "completed")

    @property
    @pulumi.getter
    def order(self) -> pulumi.Output[int]:
        return pulumi.get(self, "order")

    @property
    @pulumi.getter
    def title(self) -> pulumi.Output[str]:
        return pulumi.get(self, "title")

    @property
    @pulumi.getter
    def url(self) -> pulumi.Output[str]:
        return pulumi.get(self, "url")
