"""Factory for creating the converter of a framework."""
from translation_bridge.converter.avada_converter import AvadaConverter
from translation_bridge.converter.beaver_builder_converter import BeaverBuilderConverter
from translation_bridge.converter.bootstrap_converter import BootstrapConverter
from translation_bridge.converter.bricks_converter import BricksConverter
from translation_bridge.converter.claude_converter import ClaudeConverter
from translation_bridge.converter.divi_converter import DiviConverter
from translation_bridge.converter.elementor_converter import ElementorConverter
from translation_bridge.converter.gutenberg_converter import GutenbergConverter
from translation_bridge.converter.oxygen_converter import OxygenConverter
from translation_bridge.converter.wpbakery_converter import WPBakeryConverter
from translation_bridge.factory import FrameworkFactory
from translation_bridge.schema.frameworks import Framework


class ConverterFactory(FrameworkFactory):
    """Factory for framework converters."""

    kind = "converter"
    BUILTINS = {
        Framework.BOOTSTRAP: BootstrapConverter,
        Framework.DIVI: DiviConverter,
        Framework.ELEMENTOR: ElementorConverter,
        Framework.AVADA: AvadaConverter,
        Framework.BRICKS: BricksConverter,
        Framework.WPBAKERY: WPBakeryConverter,
        Framework.BEAVER_BUILDER: BeaverBuilderConverter,
        Framework.GUTENBERG: GutenbergConverter,
        Framework.OXYGEN: OxygenConverter,
        Framework.CLAUDE: ClaudeConverter,
    }
