"""JSDoc source scanner using tree-sitter.

Walks the tree-sitter AST of JavaScript sources, picks up `/** ... */`
comments, and turns their tags into doclets shaped like `jsdoc -X`
output. When a comment does not name its symbol, the name is inferred
from the statement that follows it:

    Phaser.Sprite = function (game, x) {}       -> class / static function
    Phaser.Sprite.prototype.kill = function ()  -> instance method
    this.health = 1;                            -> instance member of current class
    Phaser.Sprite.MAX = 10;                     -> static member
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import tree_sitter
import tree_sitter_javascript

from .type_expr import split_top_level

logger = logging.getLogger(__name__)

_JS_LANGUAGE = tree_sitter.Language(tree_sitter_javascript.language())

_FUNCTION_NODES = ("function_expression", "function", "arrow_function", "function_declaration")

_SKIP_DIRECTORIES = frozenset({"node_modules", ".git", "dist", "build"})


# =========================================================================
# Comment text → tags
# =========================================================================

def clean_comment(text: str) -> str:
    """Strip the comment delimiters and leading `*` from each line."""
    content = text.strip()
    if content.startswith("/**"):
        content = content[3:]
    if content.endswith("*/"):
        content = content[:-2]
    lines = []
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped.startswith("* "):
            lines.append(stripped[2:])
        elif stripped.startswith("*"):
            lines.append(stripped[1:].strip())
        else:
            lines.append(stripped)
    return "\n".join(lines).strip()


def split_tags(comment: str) -> List[Tuple[str, str]]:
    """Split a cleaned comment into (tag, body) pairs.

    Continuation lines are folded into the body of the preceding tag.
    Free text before the first tag is dropped.
    """
    tags: List[Tuple[str, str]] = []
    for line in comment.split("\n"):
        if line.startswith("@"):
            tag, _, body = line[1:].partition(" ")
            tags.append((tag.strip(), body.strip()))
        elif tags and line:
            tag, body = tags[-1]
            tags[-1] = (tag, f"{body} {line.strip()}".strip())
    return tags


def read_type(body: str) -> Tuple[List[str], str]:
    """Read a leading `{type}` block from a tag body.

    Returns:
        (raw type names split on top-level `|`, remainder of the body)
    """
    body = body.strip()
    if not body.startswith("{"):
        return [], body

    depth = 0
    for i, c in enumerate(body):
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                expr = body[1:i].strip()
                names = [n.strip() for n in split_top_level(expr, "|") if n.strip()]
                return names, body[i + 1:].strip()
    # Unbalanced braces: treat the rest as the type
    return [body[1:].strip()], ""


def read_name(body: str) -> str:
    """Read the first word of a tag body, unwrapping `[name=default]`."""
    word = body.split(None, 1)[0] if body.split() else ""
    if word.startswith("["):
        word = word[1:].split("]", 1)[0].split("=", 1)[0]
    return word.strip()


def parse_longname(longname: str) -> Tuple[Optional[str], str, Optional[str]]:
    """Split a longname into (memberof, name, scope).

    "Phaser.Sprite#kill" -> ("Phaser.Sprite", "kill", "instance")
    "Phaser.Sprite.MAX"  -> ("Phaser.Sprite", "MAX", "static")
    "Phaser.Utils~inner" -> ("Phaser.Utils", "inner", "inner")
    """
    for sep, scope in (("#", "instance"), ("~", "inner")):
        if sep in longname:
            owner, _, name = longname.rpartition(sep)
            return owner or None, name, scope
    if "." in longname:
        owner, _, name = longname.rpartition(".")
        if owner.endswith(".prototype"):
            return owner[: -len(".prototype")], name, "instance"
        return owner, name, "static"
    return None, longname, "global"


# =========================================================================
# Scanner
# =========================================================================

class JSDocScanner:
    """tree-sitter based scanner producing doclets from JavaScript sources.

    Extracts:
    - @class / @constructor blocks -> kind="class"
    - @method / @function blocks and documented function assignments -> kind="function"
    - @property tags and documented value assignments -> kind="member"
    - @constant blocks -> kind="constant"
    """

    def __init__(self):
        self._parser = tree_sitter.Parser(_JS_LANGUAGE)

    def scan_tree(self, src_dir: str) -> List[Dict[str, Any]]:
        """Scan every `.js` file under `src_dir`, in sorted path order."""
        doclets: List[Dict[str, Any]] = []
        file_count = 0
        for root, dirs, files in os.walk(src_dir):
            dirs[:] = sorted(d for d in dirs if d not in _SKIP_DIRECTORIES and not d.startswith("."))
            for file_name in sorted(files):
                if not file_name.endswith(".js"):
                    continue
                file_path = os.path.join(root, file_name)
                try:
                    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
                        source_text = f.read()
                except OSError as e:
                    logger.warning(f"Cannot read {file_path}: {e}")
                    continue
                doclets.extend(self.scan_source(source_text, file_path))
                file_count += 1

        logger.info(f"Scanned {file_count} source files under {src_dir}: {len(doclets)} doclets")
        return doclets

    def scan_source(self, source_text: str, file_path: str = "<source>") -> List[Dict[str, Any]]:
        """Scan one JavaScript source string."""
        source = source_text.encode("utf-8")
        tree = self._parser.parse(source)
        if tree.root_node.has_error:
            logger.debug(f"Tree-sitter reported parse errors in {file_path}")

        doclets: List[Dict[str, Any]] = []
        state = {"current_class": None}
        for node in self._walk_comments(tree.root_node):
            text = self._text(node, source)
            if not text.startswith("/**"):
                continue
            try:
                doclets.extend(self._doclets_for_comment(node, text, source, state))
            except (ValueError, IndexError) as e:
                logger.debug(f"Skipping malformed comment in {file_path} line {node.start_point[0] + 1}: {e}")
        return doclets

    # ---------------------------------------------------------------------

    def _walk_comments(self, node: tree_sitter.Node):
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type == "comment":
                yield current
            stack.extend(reversed(current.children))

    def _doclets_for_comment(
        self,
        node: tree_sitter.Node,
        text: str,
        source: bytes,
        state: Dict[str, Any],
    ) -> List[Dict[str, Any]]:
        tags = split_tags(clean_comment(text))

        doclet: Dict[str, Any] = {}
        params: List[Dict[str, Any]] = []
        returns: List[Dict[str, Any]] = []
        augments: List[str] = []
        extra_members: List[Dict[str, Any]] = []
        explicit_name: Optional[str] = None
        type_names: List[str] = []

        for tag, body in tags:
            if tag in ("class", "constructor"):
                doclet["kind"] = "class"
                if body and tag == "class":
                    explicit_name = read_name(body)
            elif tag in ("extends", "augments"):
                base = read_name(body)
                if base:
                    augments.append(base)
            elif tag in ("param", "arg", "argument"):
                names, rest = read_type(body)
                name = read_name(rest)
                if name:
                    params.append({"name": name, "type": {"names": names}})
            elif tag in ("return", "returns"):
                names, _ = read_type(body)
                returns.append({"type": {"names": names}})
            elif tag in ("property", "prop"):
                names, rest = read_type(body)
                name = read_name(rest)
                if name:
                    extra_members.append({"name": name, "type": {"names": names}})
            elif tag == "type":
                type_names, _ = read_type(body)
            elif tag in ("constant", "const"):
                doclet["kind"] = "constant"
                names, rest = read_type(body)
                if names:
                    type_names = names
                if rest:
                    explicit_name = read_name(rest)
            elif tag in ("method", "function", "func"):
                doclet["kind"] = "function"
                if body:
                    explicit_name = read_name(body)
            elif tag == "namespace":
                doclet["kind"] = "namespace"
                if body:
                    explicit_name = read_name(body)
            elif tag == "name":
                explicit_name = read_name(body)
            elif tag in ("memberof", "memberOf"):
                doclet["memberof"] = read_name(body)
            elif tag == "static":
                doclet["scope"] = "static"
            elif tag == "instance":
                doclet["scope"] = "instance"
            elif tag == "ignore":
                doclet["ignore"] = True
            elif tag == "private":
                doclet["access"] = "private"

        target = self._target_of(node, source)
        left, value_node = target if target else (None, None)
        is_function_value = value_node is not None and value_node.type in _FUNCTION_NODES

        if "kind" not in doclet:
            if is_function_value:
                doclet["kind"] = "function"
            elif left is not None or type_names:
                doclet["kind"] = "member"

        kind = doclet.get("kind")
        result: List[Dict[str, Any]] = []

        if kind is not None:
            name_source = explicit_name or left
            if name_source:
                self._apply_name(doclet, name_source, state)
            if "name" in doclet:
                if not params and is_function_value:
                    params = self._formal_params(value_node, source)
                if kind in ("class", "function") and params:
                    doclet["params"] = params
                if kind == "function" and returns:
                    doclet["returns"] = returns
                if kind in ("member", "constant"):
                    doclet["type"] = {"names": type_names}
                if kind == "class":
                    if augments:
                        doclet["augments"] = augments
                    state["current_class"] = doclet["longname"]
                result.append(doclet)

        # @property tags document members of the enclosing class
        owner = doclet.get("longname") if kind == "class" else (
            doclet.get("memberof") or state["current_class"]
        )
        if extra_members and kind not in ("member", "constant", "function") and owner:
            for member in extra_members:
                result.append({
                    "kind": "member",
                    "name": member["name"],
                    "longname": f"{owner}#{member['name']}",
                    "memberof": owner,
                    "scope": "instance",
                    "type": member["type"],
                })
        elif extra_members and kind == "member" and result:
            # `@property {T} name` above `this.name = ...` carries the member type
            if not doclet["type"]["names"]:
                doclet["type"] = extra_members[0]["type"]

        return result

    def _apply_name(self, doclet: Dict[str, Any], name_source: str, state: Dict[str, Any]):
        """Fill name/longname/memberof/scope from an explicit or inferred name."""
        kind = doclet["kind"]

        if name_source.startswith("this."):
            owner = doclet.get("memberof") or state["current_class"]
            if not owner:
                return
            name = name_source[len("this."):]
            doclet.update(name=name, longname=f"{owner}#{name}", memberof=owner)
            doclet.setdefault("scope", "instance")
            return

        if kind in ("class", "namespace"):
            doclet.update(name=name_source.rpartition(".")[2], longname=name_source)
            return

        if doclet.get("memberof") and not any(s in name_source for s in ".#~"):
            owner = doclet["memberof"]
            scope = doclet.get("scope", "instance")
            sep = "#" if scope == "instance" else "."
            doclet.update(name=name_source, longname=f"{owner}{sep}{name_source}", scope=scope)
            return

        memberof, name, scope = parse_longname(name_source)
        doclet["name"] = name
        doclet["longname"] = name_source
        if memberof:
            doclet.setdefault("memberof", memberof)
        doclet.setdefault("scope", scope)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _target_of(
        self, comment: tree_sitter.Node, source: bytes
    ) -> Optional[Tuple[str, Optional[tree_sitter.Node]]]:
        """Find the (left-hand name, value node) documented by a comment."""
        nxt = comment.next_named_sibling
        if nxt is None:
            return None

        if nxt.type == "expression_statement" and nxt.named_children:
            expr = nxt.named_children[0]
            if expr.type == "assignment_expression":
                left = expr.child_by_field_name("left")
                right = expr.child_by_field_name("right")
                if left is not None:
                    return self._text(left, source), right
            return None

        if nxt.type in ("variable_declaration", "lexical_declaration"):
            for child in nxt.named_children:
                if child.type == "variable_declarator":
                    name = child.child_by_field_name("name")
                    value = child.child_by_field_name("value")
                    if name is not None:
                        return self._text(name, source), value
            return None

        if nxt.type == "function_declaration":
            name = nxt.child_by_field_name("name")
            if name is not None:
                return self._text(name, source), nxt

        return None

    def _formal_params(self, func: tree_sitter.Node, source: bytes) -> List[Dict[str, Any]]:
        params_node = func.child_by_field_name("parameters")
        if params_node is None:
            return []
        params = []
        for child in params_node.named_children:
            if child.type == "identifier":
                params.append({"name": self._text(child, source), "type": {"names": []}})
            elif child.type == "assignment_pattern":
                left = child.child_by_field_name("left")
                if left is not None:
                    params.append({"name": self._text(left, source), "type": {"names": []}})
        return params

    @staticmethod
    def _text(node: tree_sitter.Node, source: bytes) -> str:
        return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace").strip()


def scan_source_tree(src_dir: str) -> List[Dict[str, Any]]:
    """Scan a Phaser source tree into doclets."""
    return JSDocScanner().scan_tree(src_dir)
