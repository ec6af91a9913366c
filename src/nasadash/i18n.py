"""Simple two-language (en/ko) translation helper."""

from loguru import logger

DEFAULT_LANG = "en"

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "NASA Dashboard",
        "ko": "NASA 대시보드",
    },
    "subtitle": {
        "en": "Exploring the cosmos through NASA's open APIs",
        "ko": "NASA 공개 API로 우주 둘러보기",
    },
    "loading": {
        "en": "Loading NASA Data...",
        "ko": "NASA 데이터를 불러오는 중...",
    },
    "tab_apod": {
        "en": "Picture of the Day",
        "ko": "오늘의 천문 사진",
    },
    "tab_gallery": {
        "en": "NASA Gallery",
        "ko": "NASA 갤러리",
    },
    "tab_neo": {
        "en": "Near Earth Objects",
        "ko": "근지구 천체",
    },
    "apod_heading": {
        "en": "Astronomy Picture of the Day",
        "ko": "오늘의 천문 사진",
    },
    "apod_unavailable": {
        "en": "The picture of the day could not be loaded right now.",
        "ko": "오늘의 천문 사진을 불러오지 못했어요.",
    },
    "gallery_heading": {
        "en": "NASA Image Gallery",
        "ko": "NASA 이미지 갤러리",
    },
    "gallery_subtitle": {
        "en": "Stunning images from NASA's missions and archives",
        "ko": "NASA 임무와 아카이브에서 온 이미지",
    },
    "search_placeholder": {
        "en": "Search NASA images (e.g., mars, hubble, astronaut, galaxy)...",
        "ko": "NASA 이미지 검색 (예: mars, hubble, astronaut, galaxy)...",
    },
    "btn_search": {
        "en": "Search",
        "ko": "검색",
    },
    "searching": {
        "en": "Searching NASA archives...",
        "ko": "NASA 아카이브를 검색하는 중...",
    },
    "gallery_not_searched": {
        "en": "Enter a search term to browse the archive.",
        "ko": "검색어를 입력해 아카이브를 둘러보세요.",
    },
    "gallery_empty": {
        "en": "No images found. Try a different search term!",
        "ko": "이미지를 찾지 못했어요. 다른 검색어를 입력해보세요!",
    },
    "gallery_failed": {
        "en": "The image archive could not be reached. Try searching again.",
        "ko": "이미지 아카이브에 연결하지 못했어요. 다시 검색해보세요.",
    },
    "btn_load_more": {
        "en": "Load More Images ({shown} of {total})",
        "ko": "이미지 더 보기 ({shown} / {total})",
    },
    "neo_heading": {
        "en": "Near Earth Objects Today",
        "ko": "오늘의 근지구 천체",
    },
    "neo_unavailable": {
        "en": "Near-earth object data could not be loaded right now.",
        "ko": "근지구 천체 데이터를 불러오지 못했어요.",
    },
    "stat_total": {
        "en": "Total Objects",
        "ko": "전체 천체",
    },
    "stat_hazardous": {
        "en": "Potentially Hazardous",
        "ko": "잠재적 위험",
    },
    "stat_date": {
        "en": "Date Range",
        "ko": "기간",
    },
    "neo_hazard_badge": {
        "en": "⚠ Hazardous",
        "ko": "⚠ 위험",
    },
    "neo_diameter": {
        "en": "Diameter (m)",
        "ko": "지름 (m)",
    },
    "neo_velocity": {
        "en": "Velocity (km/h)",
        "ko": "속도 (km/h)",
    },
    "neo_miss_distance": {
        "en": "Miss Distance (km)",
        "ko": "최근접 거리 (km)",
    },
    "neo_approach_date": {
        "en": "Approach Date",
        "ko": "접근일",
    },
    "neo_details": {
        "en": "View Details",
        "ko": "자세히 보기",
    },
    "footer_attribution": {
        "en": "Data provided by NASA Open APIs",
        "ko": "데이터 제공: NASA Open APIs",
    },
    "footer_demo_key": {
        "en": "Using DEMO_KEY (get your own at api.nasa.gov). Requests are heavily rate limited.",
        "ko": "DEMO_KEY 사용 중 (api.nasa.gov에서 키를 발급받으세요). 요청 횟수가 크게 제한됩니다.",
    },
}


def t(key: str, lang: str) -> str:
    """Look up key in lang, then in DEFAULT_LANG; unknown keys render as themselves."""
    translations = _STRINGS.get(key, {})
    if not translations:
        logger.debug("No translation entry for {!r}", key)
    for candidate in (lang, DEFAULT_LANG):
        text = translations.get(candidate)
        if text:
            return text
    return key
