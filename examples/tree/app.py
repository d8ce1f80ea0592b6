"""Tree: path-tree handlers addressed three different ways.

Run:
    python -m climan call app deploy.prod      (from this directory)
    python -m climan routes app:registry
"""

from enum import StrEnum

from climan import PathTree

registry = PathTree()


class Route(StrEnum):
    LAYER = "layer"
    NODE = "node"


def hello_node() -> None:
    print("Hello from layer.node!")


def hello_other() -> None:
    print("Hello from layer.otherNode!")


def deploy() -> None:
    print("Deploying")


registry.set_function([Route.LAYER, Route.NODE], hello_node)
registry.set_function(["layer", "otherNode"], hello_other)
registry.set_function("deploy", deploy)
