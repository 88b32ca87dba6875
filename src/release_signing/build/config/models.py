"""
Pydantic models for signing and build variant configuration.
"""
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

REDACTED = "********"


class SigningCredentials(BaseModel):
    """The credential bundle Gradle's release signing step expects."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key_alias: str = Field(alias="keyAlias", min_length=1)
    key_password: str = Field(alias="keyPassword", min_length=1)
    store_file: str = Field(alias="storeFile", min_length=1)
    store_password: str = Field(alias="storePassword", min_length=1)

    # Lookup order matters: the first absent key is the one reported
    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = ("keyAlias", "keyPassword", "storeFile", "storePassword")

    def store_path(self, base_dir: Path = None) -> Path:
        """Resolve storeFile the way Gradle's file() does, relative to the module directory."""
        path = Path(self.store_file).expanduser()
        if path.is_absolute():
            return path
        return (base_dir or Path.cwd()) / path

    def redacted(self) -> Dict[str, str]:
        """Credentials as a dict that is safe to print."""
        return {
            "keyAlias": self.key_alias,
            "keyPassword": REDACTED,
            "storeFile": self.store_file,
            "storePassword": REDACTED,
        }

    def __repr__(self) -> str:
        return f"SigningCredentials(key_alias={self.key_alias!r}, store_file={self.store_file!r})"

    __str__ = __repr__


class BuildVariantConfig(BaseModel):
    """A named build type with its signing config and optimization flags."""
    model_config = ConfigDict(frozen=True)

    name: str
    signing: Optional[SigningCredentials] = None
    minify_enabled: bool = False
    shrink_resources: bool = False
    debuggable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "signing": self.signing.redacted() if self.signing else None,
            "minify_enabled": self.minify_enabled,
            "shrink_resources": self.shrink_resources,
            "debuggable": self.debuggable,
        }


class ReleaseOptions(BaseModel):
    """Release build type options from android.yaml."""
    minify_enabled: bool = True
    shrink_resources: bool = True


class AndroidAppConfig(BaseModel):
    """The android { ... } block of the app module."""
    model_config = ConfigDict(extra="forbid")

    namespace: str = "com.triflash.tri_flash"
    application_id: str = "com.triflash.tri_flash"
    compile_sdk: int = 35
    min_sdk: int = 21
    target_sdk: int = 35
    ndk_version: str = "27.0.12077973"
    java_version: int = 11
    version_code: int = Field(default=1, ge=1)
    version_name: str = "1.0.0"
    flutter_source: str = "../.."
    key_properties: str = "key.properties"
    release: ReleaseOptions = Field(default_factory=ReleaseOptions)

    @field_validator("namespace", "application_id")
    @classmethod
    def _check_package_name(cls, value: str) -> str:
        parts = value.split(".")
        if len(parts) < 2 or not all(part and part[0].isalpha() and part.replace("_", "").isalnum() for part in parts):
            raise ValueError(f"'{value}' is not a valid Java package name")
        return value

    @model_validator(mode="after")
    def _check_sdk_order(self) -> "AndroidAppConfig":
        if not self.min_sdk <= self.target_sdk <= self.compile_sdk:
            raise ValueError(
                f"SDK versions must satisfy min_sdk <= target_sdk <= compile_sdk "
                f"(got {self.min_sdk}, {self.target_sdk}, {self.compile_sdk})"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class AndroidBuildConfig(BaseModel):
    """App configuration together with its resolved build variants."""
    app: AndroidAppConfig
    variants: Dict[str, BuildVariantConfig]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "android": self.app.to_dict(),
            "build_types": {name: variant.to_dict() for name, variant in self.variants.items()},
        }
