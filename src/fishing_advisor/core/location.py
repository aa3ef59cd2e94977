"""Place handling and city name resolution for weather lookups."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from .config import AdvisorConfig
from .errors import NetworkFailure, PlaceNotFound, RateLimited, WeatherApiError

logger = logging.getLogger(__name__)

REVERSE_GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/reverse"


@dataclass(frozen=True)
class Place:
    """A place the weather provider can be queried for.

    Attributes:
        name: Human-readable place name
        query: Provider free-text identifier (e.g. "Beijing")
        latitude: Latitude in decimal degrees (-90 to 90), if known
        longitude: Longitude in decimal degrees (-180 to 180), if known
    """
    name: str
    query: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    def __post_init__(self):
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("Latitude and longitude must be given together")
        if self.latitude is not None and not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if self.longitude is not None and not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")
        if self.query is None and self.latitude is None:
            raise ValueError("Place needs a query or coordinates")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float,
                         name: str | None = None) -> Place:
        """Create a Place from coordinates with optional name."""
        place_name = name or f"Location ({latitude:.4f}, {longitude:.4f})"
        return cls(name=place_name, latitude=latitude, longitude=longitude)

    @classmethod
    def default(cls, config: AdvisorConfig | None = None) -> Place:
        """Create the fallback Place from configuration (Beijing unless overridden)."""
        config = config or AdvisorConfig.from_env()
        return resolve_by_name(config.default_city)

    def to_params(self) -> dict[str, str | float]:
        """Query parameters identifying this place to OpenWeatherMap."""
        if self.has_coordinates:
            return {"lat": self.latitude, "lon": self.longitude}
        return {"q": self.query}


# Known city names mapped to provider-recognized identifiers
PRESET_CITIES: dict[str, str] = {
    # Municipalities
    "北京": "Beijing",
    "上海": "Shanghai",
    "天津": "Tianjin",
    "重庆": "Chongqing",
    # Hebei
    "石家庄": "Shijiazhuang",
    "保定": "Baoding",
    "唐山": "Tangshan",
    "秦皇岛": "Qinhuangdao",
    "邯郸": "Handan",
    "邢台": "Xingtai",
    "张家口": "Zhangjiakou",
    "承德": "Chengde",
    "沧州": "Cangzhou",
    "廊坊": "Langfang",
    "衡水": "Hengshui",
    # Shanxi
    "太原": "Taiyuan",
    "大同": "Datong",
    "运城": "Yuncheng",
    "临汾": "Linfen",
    "长治": "Changzhi",
    # Inner Mongolia
    "呼和浩特": "Hohhot",
    "包头": "Baotou",
    "鄂尔多斯": "Ordos",
    "赤峰": "Chifeng",
    # Liaoning
    "沈阳": "Shenyang",
    "大连": "Dalian",
    "鞍山": "Anshan",
    "抚顺": "Fushun",
    "丹东": "Dandong",
    "锦州": "Jinzhou",
    "营口": "Yingkou",
    # Jilin
    "长春": "Changchun",
    "吉林": "Jilin",
    "延吉": "Yanji",
    # Heilongjiang
    "哈尔滨": "Harbin",
    "齐齐哈尔": "Qiqihar",
    "大庆": "Daqing",
    "牡丹江": "Mudanjiang",
    "佳木斯": "Jiamusi",
    # Jiangsu
    "南京": "Nanjing",
    "苏州": "Suzhou",
    "无锡": "Wuxi",
    "常州": "Changzhou",
    "南通": "Nantong",
    "扬州": "Yangzhou",
    "镇江": "Zhenjiang",
    "徐州": "Xuzhou",
    "盐城": "Yancheng",
    "连云港": "Lianyungang",
    "泰州": "Taizhou",
    "淮安": "Huai'an",
    # Zhejiang
    "杭州": "Hangzhou",
    "宁波": "Ningbo",
    "温州": "Wenzhou",
    "绍兴": "Shaoxing",
    "嘉兴": "Jiaxing",
    "湖州": "Huzhou",
    "金华": "Jinhua",
    "台州": "Taizhou",
    "舟山": "Zhoushan",
    "丽水": "Lishui",
    # Anhui
    "合肥": "Hefei",
    "芜湖": "Wuhu",
    "蚌埠": "Bengbu",
    "安庆": "Anqing",
    "黄山": "Huangshan",
    "马鞍山": "Ma'anshan",
    # Fujian
    "福州": "Fuzhou",
    "厦门": "Xiamen",
    "泉州": "Quanzhou",
    "漳州": "Zhangzhou",
    "莆田": "Putian",
    # Jiangxi
    "南昌": "Nanchang",
    "九江": "Jiujiang",
    "赣州": "Ganzhou",
    "景德镇": "Jingdezhen",
    "上饶": "Shangrao",
    # Shandong
    "济南": "Jinan",
    "青岛": "Qingdao",
    "烟台": "Yantai",
    "威海": "Weihai",
    "潍坊": "Weifang",
    "淄博": "Zibo",
    "临沂": "Linyi",
    "济宁": "Jining",
    "泰安": "Tai'an",
    "日照": "Rizhao",
    "东营": "Dongying",
    # Henan
    "郑州": "Zhengzhou",
    "洛阳": "Luoyang",
    "开封": "Kaifeng",
    "新乡": "Xinxiang",
    "南阳": "Nanyang",
    "安阳": "Anyang",
    "信阳": "Xinyang",
    # Hubei
    "武汉": "Wuhan",
    "宜昌": "Yichang",
    "襄阳": "Xiangyang",
    "荆州": "Jingzhou",
    "十堰": "Shiyan",
    "黄石": "Huangshi",
    # Hunan
    "长沙": "Changsha",
    "株洲": "Zhuzhou",
    "湘潭": "Xiangtan",
    "岳阳": "Yueyang",
    "衡阳": "Hengyang",
    "常德": "Changde",
    "张家界": "Zhangjiajie",
    # Guangdong
    "广州": "Guangzhou",
    "深圳": "Shenzhen",
    "珠海": "Zhuhai",
    "佛山": "Foshan",
    "东莞": "Dongguan",
    "中山": "Zhongshan",
    "惠州": "Huizhou",
    "汕头": "Shantou",
    "湛江": "Zhanjiang",
    "江门": "Jiangmen",
    "肇庆": "Zhaoqing",
    # Guangxi
    "南宁": "Nanning",
    "桂林": "Guilin",
    "柳州": "Liuzhou",
    "北海": "Beihai",
    # Hainan
    "海口": "Haikou",
    "三亚": "Sanya",
    # Sichuan
    "成都": "Chengdu",
    "绵阳": "Mianyang",
    "乐山": "Leshan",
    "宜宾": "Yibin",
    "南充": "Nanchong",
    "泸州": "Luzhou",
    # Guizhou
    "贵阳": "Guiyang",
    "遵义": "Zunyi",
    # Yunnan
    "昆明": "Kunming",
    "大理": "Dali",
    "丽江": "Lijiang",
    "曲靖": "Qujing",
    "西双版纳": "Jinghong",
    # Tibet
    "拉萨": "Lhasa",
    # Shaanxi
    "西安": "Xi'an",
    "宝鸡": "Baoji",
    "咸阳": "Xianyang",
    "延安": "Yan'an",
    "汉中": "Hanzhong",
    # Gansu
    "兰州": "Lanzhou",
    "天水": "Tianshui",
    "嘉峪关": "Jiayuguan",
    # Qinghai
    "西宁": "Xining",
    # Ningxia
    "银川": "Yinchuan",
    # Xinjiang
    "乌鲁木齐": "Urumqi",
    "喀什": "Kashgar",
    "克拉玛依": "Karamay",
    # Special administrative regions and Taiwan
    "香港": "Hong Kong",
    "澳门": "Macau",
    "台北": "Taipei",
    "高雄": "Kaohsiung",
}


def _lookup_preset(name: str) -> str | None:
    """Look up a city name, also trying it without a trailing "市"."""
    if name in PRESET_CITIES:
        return PRESET_CITIES[name]
    if name.endswith("市") and name[:-1] in PRESET_CITIES:
        return PRESET_CITIES[name[:-1]]
    return None


def resolve_by_name(name: str) -> Place:
    """Resolve a free-text city name to a Place.

    Known names are mapped to the provider's identifier; anything else is
    passed through unchanged for the provider to resolve.

    Args:
        name: City name (e.g. "北京", "保定市", "London")

    Returns:
        Place whose query is the provider identifier

    Raises:
        ValueError: If the name is empty

    Example:
        >>> resolve_by_name("北京").query
        'Beijing'
        >>> resolve_by_name("London").query
        'London'
    """
    normalized = name.strip()
    if not normalized:
        raise ValueError("City name must not be empty")

    mapped = _lookup_preset(normalized)
    if mapped is not None:
        return Place(name=normalized, query=mapped)

    logger.debug(f"'{normalized}' not in city table, passing through to provider")
    return Place(name=normalized, query=normalized)


def _chinese_name_for(english_name: str) -> str | None:
    for chinese, romanized in PRESET_CITIES.items():
        if romanized == english_name:
            return chinese
    return None


def pick_place_name(candidate: dict) -> str:
    """Choose a display name from a reverse geocoding candidate.

    Prefers the Chinese local name with a trailing "市" removed. When that name
    still refers to a district or county, the canonical name is mapped back to
    a known Chinese city, or used as is.
    """
    english_name = candidate.get("name", "")
    local_name = (candidate.get("local_names") or {}).get("zh")
    if not local_name:
        return english_name

    city_name = local_name.replace("市", "", 1)
    if "区" in city_name or "县" in city_name:
        return _chinese_name_for(english_name) or english_name
    return city_name


def resolve_by_coordinates(
    latitude: float,
    longitude: float,
    config: AdvisorConfig | None = None
) -> Place:
    """Resolve coordinates to a named Place via reverse geocoding.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        config: Advisor configuration (API key and timeout)

    Returns:
        Place carrying both the resolved name and the coordinates

    Raises:
        PlaceNotFound: If the provider returns no candidates
        NetworkFailure: On transport errors
        RateLimited: If the provider throttles the request
        WeatherApiError: On other provider errors
    """
    config = config or AdvisorConfig.from_env()
    point = Place.from_coordinates(latitude, longitude)

    try:
        response = requests.get(
            REVERSE_GEOCODING_URL,
            params={
                **point.to_params(),
                "limit": 1,
                "appid": config.api_key,
            },
            timeout=config.timeout,
        )
    except requests.RequestException as e:
        logger.warning(f"Reverse geocoding request failed: {e}")
        raise NetworkFailure() from e

    if response.status_code == 429:
        raise RateLimited()
    if response.status_code != 200:
        logger.warning(f"Reverse geocoding returned status {response.status_code}")
        raise WeatherApiError()

    try:
        candidates = response.json()
    except ValueError as e:
        raise WeatherApiError() from e

    if not isinstance(candidates, list):
        logger.warning(f"Unexpected reverse geocoding payload: {type(candidates).__name__}")
        raise WeatherApiError()

    if not candidates:
        logger.warning(f"No place found at ({latitude}, {longitude})")
        raise PlaceNotFound()

    if not isinstance(candidates[0], dict):
        raise WeatherApiError()

    name = pick_place_name(candidates[0])
    return Place(name=name, query=name, latitude=latitude, longitude=longitude)


def get_preset_city_names() -> list[str]:
    """Get list of all known city names, in table order."""
    return list(PRESET_CITIES.keys())
