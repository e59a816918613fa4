"""
Main converter class and command line entry point.
"""

import sys
import argparse
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import HyperscriptifyError, TemplateNotFoundError
from .generator import Fragment, JSONGenerator, h as default_h
from .source import SoupNode, SourceNode
from .transformer import DEFAULT_MAX_DEPTH, PropNameMappings, create_propsify, hyperscriptify
from .transformer.propsify import Propsify
from .utils.file_utils import read_file, write_file
from .utils.logger import configure_cli_logging, get_logger
from .utils.string_utils import to_pascal_case

logger = get_logger(__name__)

HTML_PARSER = "html.parser"


class Hyperscriptifier:
    """Converts markup trees into hyperscript trees for one set of components."""

    def __init__(
        self,
        h: Callable[..., Any] = default_h,
        fragment: Any = Fragment,
        components: Optional[Mapping[str, Any]] = None,
        propsify: Optional[Propsify] = None,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ):
        """
        Initialize the converter.

        Args:
            h: Hyperscript function. Defaults to the framework-neutral h().
            fragment: Fragment marker passed to h() for fragment nodes.
            components: Tag name -> component. Tag names are lowercased.
            propsify: Optional props strategy, see transformer.propsify.
            max_depth: Deepest nesting allowed, or None for no limit.
        """
        self.h = h
        self.fragment = fragment
        self.components: Dict[str, Any] = {
            tag.lower(): component for tag, component in (components or {}).items()
        }
        self.propsify = propsify
        self.max_depth = max_depth

    def convert(self, node: SourceNode) -> Any:
        """Convert an element or fragment. Other nodes give None."""
        logger.debug(f"Converting {node.node_name} with {len(self.components)} registered components")
        return hyperscriptify(
            node,
            self.h,
            self.fragment,
            self.components,
            self.propsify,
            max_depth=self.max_depth,
        )

    def convert_soup(self, soup: Tag, as_fragment: bool = False) -> Any:
        """
        Convert a parsed BeautifulSoup document or tag.

        Args:
            soup: A BeautifulSoup object (converted as a fragment) or a Tag
            as_fragment: Convert the tag's content as a fragment instead of
                the tag itself (e.g. for <template> elements)
        """
        node = SoupNode.fragment(soup) if as_fragment else SoupNode.wrap(soup)
        return self.convert(node)

    def convert_html(self, html: str, template_id: Optional[str] = None) -> Any:
        """
        Parse HTML with BeautifulSoup and convert it.

        Args:
            html: Markup text
            template_id: If given, convert only the content of the
                <template> element with this id

        Raises:
            TemplateNotFoundError: If template_id is not found
        """
        # Keep class/rel/... values exactly as written instead of splitting them
        soup = BeautifulSoup(html, HTML_PARSER, multi_valued_attributes=None)
        if template_id is None:
            return self.convert_soup(soup)

        template = soup.find("template", id=template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return self.convert_soup(template, as_fragment=True)


def build_components(tags: Iterable[str]) -> Dict[str, str]:
    """Register each tag as a component named by its PascalCase form."""
    return {tag.lower(): to_pascal_case(tag) for tag in tags}


def convert_file(
    input_path: str,
    components: Mapping[str, Any],
    template_id: Optional[str] = None,
    use_propsify: bool = False,
) -> str:
    """
    Convert an HTML file to a JSON hyperscript tree.

    Returns:
        JSON text
    """
    logger.info(f"Converting {input_path}")

    html = read_file(input_path)
    if html is None:
        raise ValueError(f"Could not read file: {input_path}")

    propsify = None
    if use_propsify:
        mappings = PropNameMappings()
        propsify = create_propsify(
            component_prop_names=mappings.component_prop_names,
            element_prop_names=mappings.element_prop_names,
        )

    converter = Hyperscriptifier(components=components, propsify=propsify)
    tree = converter.convert_html(html, template_id=template_id)
    return JSONGenerator().generate(tree)


def main(argv: Optional[list] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Convert HTML into a hyperscript element tree (JSON)"
    )
    parser.add_argument("input", help="Input HTML file")
    parser.add_argument("-o", "--output", help="Output JSON file (default: stdout)")
    parser.add_argument(
        "-c",
        "--component",
        action="append",
        default=[],
        metavar="TAG",
        help="Tag name to treat as a component (repeatable)",
    )
    parser.add_argument("--template", metavar="ID", help="Only convert <template id=ID>")
    parser.add_argument(
        "--propsify",
        action="store_true",
        help="camelCase and JSON-decode component props, rename React attributes",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    configure_cli_logging(args.log_level)

    try:
        output = convert_file(
            args.input,
            build_components(args.component),
            template_id=args.template,
            use_propsify=args.propsify,
        )
    except (HyperscriptifyError, ValueError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1
    except RecursionError:
        logger.error(f"Conversion failed: {args.input} is nested too deeply to serialise")
        return 1

    if args.output:
        if not write_file(args.output, output + "\n"):
            return 1
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
