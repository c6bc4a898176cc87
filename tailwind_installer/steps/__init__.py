from .step_10_download_binary import DownloadBinaryStep
from .step_20_prepare_assets import PrepareAssetsStep
from .step_30_tailwind_config import TailwindConfigStep
from .step_40_app_css import AppCssStep
from .step_50_app_js import AppJsStep

__all__ = [
    "DownloadBinaryStep",
    "PrepareAssetsStep",
    "TailwindConfigStep",
    "AppCssStep",
    "AppJsStep",
]
