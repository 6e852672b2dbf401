"""Process-scoped bundle of the parser and converter factories."""
from typing import List, Optional

from translation_bridge.converter.converter_factory import ConverterFactory
from translation_bridge.parser.parser_factory import ParserFactory


class FrameworkRegistry:
    """Holds one parser factory and one converter factory.

    Build one at application start and hand it to every ``Translator``;
    tests build a fresh one each.
    """

    def __init__(
        self,
        parsers: Optional[ParserFactory] = None,
        converters: Optional[ConverterFactory] = None,
    ):
        self.parsers = parsers or ParserFactory()
        self.converters = converters or ConverterFactory()

    def get_supported_frameworks(self) -> List[str]:
        """Frameworks that can be both read and written."""
        converters = set(self.converters.get_supported_frameworks())
        return [name for name in self.parsers.get_supported_frameworks() if name in converters]

    def clear_cache(self) -> None:
        self.parsers.clear_cache()
        self.converters.clear_cache()
