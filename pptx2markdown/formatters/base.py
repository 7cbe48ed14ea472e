from abc import abstractmethod
from typing import Protocol

from pptx2markdown.extractors.data_types import Slide


class SlideFormatter(Protocol):
    @abstractmethod
    def render(self, slide: Slide, resource_path: str) -> str:
        """
        Render one slide as markup.

        `resource_path` is the prefix under which resources external to the
        slide (images) are referenced. Implementations must not mutate the
        slide and must return identical output for identical input.
        """
        ...
