"""Recipe page scraping: fetch a URL and pull out recipe text and images."""

import logging
from dataclasses import dataclass, field
from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup

from larder.config import get_settings

logger = logging.getLogger(__name__)

NAME_SELECTORS = [
    'h1[class*="recipe"]',
    'h1[class*="title"]',
    '[class*="recipe-title"]',
    '[class*="recipe-name"]',
    "h1",
    "title",
]

INGREDIENT_SELECTORS = [
    '[itemprop="recipeIngredient"]',
    '[class*="ingredient"]',
    '[data-testid*="ingredient"]',
    '[class*="recipe-ingredient"]',
]

IMAGE_CONTAINER_SELECTORS = [
    '[class*="recipe"] img',
    "article img",
    "main img",
]


@dataclass
class ScrapedPage:
    """Raw recipe text and candidate image URLs."""

    text: str
    images: list[str] = field(default_factory=list)


def validate_url(url: str) -> str:
    """Return the trimmed URL or raise ValueError if it isn't http(s)."""
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("Invalid URL format")
    return url


def _clean(text: str) -> str:
    return " ".join(text.split())


def extract_recipe_name(soup: BeautifulSoup) -> str:
    for selector in NAME_SELECTORS:
        element = soup.select_one(selector)
        if element:
            name = _clean(element.get_text(" "))
            if name:
                return name
    return ""


def extract_ingredient_text(soup: BeautifulSoup) -> str:
    """Ingredient lines, one per line, or "" when none are recognisable."""
    for selector in INGREDIENT_SELECTORS:
        elements = soup.select(selector)
        if not elements:
            continue
        list_items = [li for element in elements for li in element.find_all("li")]
        if list_items:
            lines = [_clean(li.get_text(" ")) for li in list_items]
        else:
            lines = [_clean(element.get_text(" ")) for element in elements]
        lines = list(dict.fromkeys(line for line in lines if line))
        if lines:
            return "\n".join(lines)

    # Fall back to the first list that looks like an ingredient list
    for candidate in soup.find_all(["ul", "ol"])[:5]:
        items = candidate.find_all("li")
        if 3 <= len(items) <= 30:
            return "\n".join(_clean(li.get_text(" ")) for li in items)
    return ""


def extract_image_urls(soup: BeautifulSoup, base_url: str, limit: int) -> list[str]:
    """Absolute, de-duplicated candidate image URLs, best candidates first."""
    candidates: list[str] = []
    for meta in soup.select('meta[property="og:image"], meta[name="twitter:image"]'):
        if meta.get("content"):
            candidates.append(meta["content"])
    for element in soup.select('[itemprop="image"]'):
        src = element.get("content") or element.get("src")
        if src:
            candidates.append(src)
    for selector in IMAGE_CONTAINER_SELECTORS:
        for img in soup.select(selector):
            src = img.get("src") or img.get("data-src")
            if src and not src.startswith("data:"):
                candidates.append(src)

    images = []
    for src in candidates:
        absolute = urljoin(base_url, src.strip())
        if urlparse(absolute).scheme in {"http", "https"} and absolute not in images:
            images.append(absolute)
        if len(images) >= limit:
            break
    return images


def parse_recipe_html(html: str, base_url: str, max_chars: int, max_images: int) -> ScrapedPage:
    """Build the text handed to the extractor from a recipe page."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    recipe_name = extract_recipe_name(soup)
    ingredients_text = extract_ingredient_text(soup)

    parts = []
    if recipe_name:
        parts.append(f"Recipe Name: {recipe_name}")
    if ingredients_text:
        parts.append(f"Ingredients:\n{ingredients_text}")
    else:
        main = soup.select_one("main") or soup.select_one('[class*="recipe"]') or soup.select_one(
            '[class*="content"]'
        )
        main_text = _clean(main.get_text(" ")) if main else ""
        if main_text:
            parts.append(f"Recipe Content:\n{main_text[:max_chars]}")

    text = "\n\n".join(parts)
    if not text.strip():
        raise ValueError("Could not extract recipe data from the URL")

    return ScrapedPage(text=text, images=extract_image_urls(soup, base_url, max_images))


class RecipeScraper:
    """Fetches recipe pages over HTTP."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = get_settings()
        self.transport = transport

    async def scrape(self, url: str) -> ScrapedPage:
        """Fetch a recipe page and return its recipe text and images.

        Raises ValueError with a readable message on bad URLs, non-2xx
        responses and pages without recipe content; network failures
        surface as httpx errors.
        """
        url = validate_url(url)

        async with httpx.AsyncClient(
            timeout=self.settings.scraper_timeout_seconds,
            headers={"User-Agent": self.settings.scraper_user_agent},
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            response = await client.get(url)

        if not response.is_success:
            raise ValueError(f"Failed to fetch URL: {response.status_code} {response.reason_phrase}")

        page = parse_recipe_html(
            response.text,
            base_url=str(response.url),
            max_chars=self.settings.scraper_max_content_chars,
            max_images=self.settings.scraper_max_images,
        )
        logger.info(f"Scraped {url}: {len(page.text)} chars, {len(page.images)} images")
        return page
