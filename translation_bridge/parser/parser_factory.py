"""Factory for creating the parser of a framework."""
from translation_bridge.factory import FrameworkFactory
from translation_bridge.parser.avada_parser import AvadaParser
from translation_bridge.parser.beaver_builder_parser import BeaverBuilderParser
from translation_bridge.parser.bootstrap_parser import BootstrapParser
from translation_bridge.parser.bricks_parser import BricksParser
from translation_bridge.parser.claude_parser import ClaudeParser
from translation_bridge.parser.divi_parser import DiviParser
from translation_bridge.parser.elementor_parser import ElementorParser
from translation_bridge.parser.gutenberg_parser import GutenbergParser
from translation_bridge.parser.oxygen_parser import OxygenParser
from translation_bridge.parser.wpbakery_parser import WPBakeryParser
from translation_bridge.schema.frameworks import Framework


class ParserFactory(FrameworkFactory):
    """Factory for framework parsers.

    Usage:
    ```python
    parsers = ParserFactory()
    parsers.create("vc").parse('[vc_row][vc_column][/vc_column][/vc_row]')
    ```
    """

    kind = "parser"
    BUILTINS = {
        Framework.BOOTSTRAP: BootstrapParser,
        Framework.DIVI: DiviParser,
        Framework.ELEMENTOR: ElementorParser,
        Framework.AVADA: AvadaParser,
        Framework.BRICKS: BricksParser,
        Framework.WPBAKERY: WPBakeryParser,
        Framework.BEAVER_BUILDER: BeaverBuilderParser,
        Framework.GUTENBERG: GutenbergParser,
        Framework.OXYGEN: OxygenParser,
        Framework.CLAUDE: ClaudeParser,
    }
