"""Configuration management for the Sauce Demo E2E suite."""

from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

# Load .env file at import time
load_dotenv()


class _Frozen(BaseModel):
    """Read-only configuration section."""

    model_config = ConfigDict(frozen=True)


class BrowserConfig(_Frozen):
    """Browser launch configuration."""

    name: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720


class TimeoutConfig(_Frozen):
    """Timeouts in milliseconds."""

    default: int = 30000
    navigation: int = 60000


class LoginLocators(_Frozen):
    username_input: str = "#user-name"
    password_input: str = "#password"
    login_button: str = 'input[name="login-button"]'
    error_message: str = '[data-test="error"]'


class InventoryLocators(_Frozen):
    inventory_container: str = ".inventory_list"
    inventory_item: str = ".inventory_item"
    add_to_cart_button: str = ".inventory_item button"
    remove_button: str = 'button:has-text("Remove")'
    product_name: str = ".inventory_item_name"
    product_price: str = ".inventory_item_price"
    shopping_cart_badge: str = ".shopping_cart_badge"
    shopping_cart_link: str = "a.shopping_cart_link"


class CartLocators(_Frozen):
    cart_item: str = ".cart_item"
    cart_item_name: str = ".inventory_item_name"
    cart_item_price: str = ".inventory_item_price"
    checkout_button: str = "#checkout"
    continue_shopping: str = "#continue-shopping"
    remove_button: str = 'button:has-text("Remove")'


class CheckoutLocators(_Frozen):
    first_name_input: str = '[data-test="firstName"]'
    last_name_input: str = '[data-test="lastName"]'
    postal_code_input: str = '[data-test="postalCode"]'
    continue_button: str = "#continue"
    cancel_button: str = "#cancel"
    error_message: str = '[data-test="error"]'


class CheckoutOverviewLocators(_Frozen):
    cart_item: str = ".cart_item"
    finish_button: str = 'button:has-text("Finish")'
    cancel_button: str = "#cancel"
    subtotal: str = ".summary_subtotal_label"
    tax: str = ".summary_tax_label"
    total: str = ".summary_total_label"


class CheckoutCompleteLocators(_Frozen):
    complete_header: str = ".complete-header"
    complete_text: str = ".complete-text"
    back_home_button: str = "#back-to-products"


class LocatorsConfig(_Frozen):
    """Selectors for every screen, keyed by semantic name."""

    login: LoginLocators = Field(default_factory=LoginLocators)
    inventory: InventoryLocators = Field(default_factory=InventoryLocators)
    cart: CartLocators = Field(default_factory=CartLocators)
    checkout: CheckoutLocators = Field(default_factory=CheckoutLocators)
    checkout_overview: CheckoutOverviewLocators = Field(default_factory=CheckoutOverviewLocators)
    checkout_complete: CheckoutCompleteLocators = Field(default_factory=CheckoutCompleteLocators)


class MessagesConfig(_Frozen):
    """Expected UI messages used by assertions."""

    order_success: str = "Thank you for your order!"
    order_dispatched: str = (
        "Your order has been dispatched, and will arrive just as fast as the pony can get there!"
    )
    login_error: str = "Epic sadface: Username and password do not match any user in this service"
    locked_out_error: str = "Epic sadface: Sorry, this user has been locked out."


class ScreenshotsConfig(_Frozen):
    """Screenshot destinations."""

    order_confirmation: Path = Path("screenshots/order-confirmation.png")
    failures_dir: Path = Path("screenshots/failures")


class Config(BaseSettings):
    """Main configuration for the E2E suite."""

    model_config = SettingsConfigDict(
        env_prefix="SAUCE_E2E_",
        env_nested_delimiter="__",
        frozen=True,
    )

    # Core settings
    base_url: str = "https://www.saucedemo.com/"
    products_to_buy: int = Field(default=3, ge=0)
    test_data_path: Path | None = None

    # Sub-configurations
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)
    locators: LocatorsConfig = Field(default_factory=LocatorsConfig)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    screenshots: ScreenshotsConfig = Field(default_factory=ScreenshotsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment wins over values read from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings


CONFIG_FILE_NAMES = ("sauce_e2e.yaml", "sauce_e2e.yml", ".sauce_e2e.yaml")


def find_config_file(directory: Path | None = None) -> Path | None:
    """First known config file name present in ``directory`` (default: cwd)."""
    directory = Path.cwd() if directory is None else directory
    return next((directory / name for name in CONFIG_FILE_NAMES if (directory / name).is_file()), None)


def read_config_file(path: Path) -> dict:
    """YAML settings from ``path``, unwrapped from an optional ``sauce_e2e:`` key."""
    raw = yaml.safe_load(path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(raw).__name__}")
    section = raw.get("sauce_e2e", raw)
    return section or {}


def load_config(config_path: Path | None = None) -> Config:
    """Build the configuration from an optional YAML file, with environment on top."""
    path = config_path or find_config_file()
    settings = read_config_file(path) if path and path.exists() else {}
    return Config(**settings)
