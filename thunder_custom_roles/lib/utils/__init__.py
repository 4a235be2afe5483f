from .normalize_name import normalize_name, normalize_name_to_alphanumeric
from .set_nested import set_nested
from .template_from_dataclass import template_from_dataclass
