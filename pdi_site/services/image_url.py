# pdi_site/services/image_url.py
"""
Sanity CDN image URLs.

    url_for_image(event.image).auto("format").fit("crop").crop("focalpoint").width(1200).height(900).url()

Every chained call returns a new builder, so a partially configured builder can
be reused for several sizes.
"""
import re
from typing import Dict, Optional, Tuple, Union
from urllib.parse import urlencode

from pdi_site import config
from pdi_site.models.content import SanityImage

# image-<assetId>-<width>x<height>-<format>
_ASSET_REF_RE = re.compile(r"^image-(?P<id>[A-Za-z0-9]+)-(?P<w>\d+)x(?P<h>\d+)-(?P<fmt>[a-z0-9]+)$")

# query param name + emit order
_PARAMS = [
    ("width", "w"),
    ("height", "h"),
    ("fit", "fit"),
    ("crop", "crop"),
    ("auto", "auto"),
]

def parse_asset_ref(ref: str) -> Tuple[str, int, int, str]:
    m = _ASSET_REF_RE.match(ref or "")
    if not m:
        raise ValueError(f"Malformed image asset reference: {ref!r}")
    return m.group("id"), int(m.group("w")), int(m.group("h")), m.group("fmt")

class ImageUrlBuilder:
    def __init__(self, image: SanityImage, project_id: str, dataset: str,
                 base_url: str = "https://cdn.sanity.io", options: Optional[Dict[str, Union[str, int]]] = None):
        self.image = image
        self.project_id = project_id
        self.dataset = dataset
        self.base_url = base_url.rstrip("/")
        self.options: Dict[str, Union[str, int]] = dict(options or {})

    def _with(self, **opts) -> "ImageUrlBuilder":
        merged = {**self.options, **opts}
        return ImageUrlBuilder(self.image, self.project_id, self.dataset, self.base_url, merged)

    def width(self, w: int) -> "ImageUrlBuilder":
        return self._with(width=int(w))

    def height(self, h: int) -> "ImageUrlBuilder":
        return self._with(height=int(h))

    def fit(self, mode: str) -> "ImageUrlBuilder":
        return self._with(fit=mode)

    def crop(self, mode: str) -> "ImageUrlBuilder":
        return self._with(crop=mode)

    def auto(self, mode: str) -> "ImageUrlBuilder":
        return self._with(auto=mode)

    def _rect(self, src_w: int, src_h: int) -> Optional[str]:
        c = self.image.crop
        if c is None or not any((c.top, c.bottom, c.left, c.right)):
            return None
        left = round(c.left * src_w)
        top = round(c.top * src_h)
        width = round(src_w - c.right * src_w - left)
        height = round(src_h - c.bottom * src_h - top)
        return f"{left},{top},{width},{height}"

    def url(self) -> str:
        if not self.project_id:
            raise ValueError("SANITY_PROJECT_ID is not configured")
        asset_id, src_w, src_h, fmt = parse_asset_ref(self.image.asset.ref)
        path = f"{self.base_url}/images/{self.project_id}/{self.dataset}/{asset_id}-{src_w}x{src_h}.{fmt}"

        query = []
        rect = self._rect(src_w, src_h)
        if rect:
            query.append(("rect", rect))
        # focal point only matters when cropping to it
        if self.image.hotspot is not None and self.options.get("crop") == "focalpoint":
            query.append(("fp-x", repr(self.image.hotspot.x)))
            query.append(("fp-y", repr(self.image.hotspot.y)))
        for opt, name in _PARAMS:
            if opt in self.options:
                query.append((name, self.options[opt]))

        if not query:
            return path
        return f"{path}?{urlencode(query, safe=',')}"

def url_for_image(image: SanityImage, project_id: Optional[str] = None, dataset: Optional[str] = None) -> ImageUrlBuilder:
    return ImageUrlBuilder(
        image,
        project_id=project_id if project_id is not None else config.SANITY_PROJECT_ID,
        dataset=dataset or config.SANITY_DATASET,
        base_url=config.SANITY_IMAGE_CDN,
    )
