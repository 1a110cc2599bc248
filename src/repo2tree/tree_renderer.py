"""Text rendering of an annotated repository tree.

The output resembles the Unix ``tree`` command. Directories carry a trailing
``/`` and annotations are appended as a ``#`` comment, which keeps each line
readable for people and easy to follow for language models::

    repo/
    ├── dist/  # build artifacts
    ├── src/
    │   ├── main.py  # references .util in imports
    │   └── util.py
    └── README.md
"""

from typing import Iterator

from repo2tree.file_system_tree.tree_node import TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "


def format_entry(node: TreeNode) -> str:
    """Format the name and annotation of a single node.

    Example:
        >>> format_entry(TreeNode("dist", is_dir=True, is_ignored=True, annotation="build artifacts"))
        'dist/  # build artifacts'
        >>> format_entry(TreeNode("main.py"))
        'main.py'
    """
    text = f"{node.name}/" if node.is_dir else node.name
    if node.annotation:
        text = f"{text}  # {node.annotation}"
    return text


def stream_tree_lines(root: TreeNode) -> Iterator[str]:
    """Generate the tree representation one line at a time.

    Children are rendered in the order they are stored, which is name order for
    trees built by the walker. Ignored directories are rendered without descending.

    Args:
        root: The node representing the repository root.

    Yields:
        Lines of the tree representation, without line endings.

    Example:
        >>> root = TreeNode("repo", is_dir=True)
        >>> src = TreeNode("src", parent=root, is_dir=True)
        >>> _ = TreeNode("main.py", parent=src)
        >>> _ = TreeNode("setup.py", parent=root)
        >>> print("\\n".join(stream_tree_lines(root)))
        repo/
        ├── src/
        │   └── main.py
        └── setup.py
    """
    yield f"{root.name}/"
    yield from _stream_children(root, "")


def _stream_children(node: TreeNode, prefix: str) -> Iterator[str]:
    if node.is_ignored:
        return
    children = node.children
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        yield f"{prefix}{LAST_BRANCH if is_last else BRANCH}{format_entry(child)}"
        if child.is_dir:
            yield from _stream_children(child, prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX))


def render_tree(root: TreeNode) -> str:
    """Get the complete tree representation as a single string."""
    return "\n".join(stream_tree_lines(root))
