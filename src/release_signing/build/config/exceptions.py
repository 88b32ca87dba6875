"""
Exception classes with built-in guidance for signing configuration.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, error_type: str = None, path: str = None,
                 key_name: str = None, variant_name: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.path = path
        self.key_name = key_name
        self.variant_name = variant_name
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class MissingKeyError(ConfigException):
    """Raised when a required signing key is absent (or blank) in key.properties."""
    def __init__(self, message: str, key_name: str, path: str = None,
                 empty: bool = False, file_found: bool = True, **kwargs):
        self.empty = empty
        self.file_found = file_found
        super().__init__(message, error_type="missing_key", key_name=key_name, path=path, **kwargs)

    def _generate_guidance(self):
        path = self.path or 'key.properties'
        if not self.file_found:
            return f"""
❌ Release signing key '{self.key_name}' unavailable because {path} was not found
💡 Resolve this in one of the following ways:
   1. Create the file: invoke signing.template --path={path}
      then fill in keyAlias, keyPassword, storeFile and storePassword
   2. Or point at an existing file: export SIGNING_PROPERTIES_FILE=/path/to/key.properties
"""
        if self.empty:
            return f"""
❌ Release signing key '{self.key_name}' is blank in {path}
💡 Set a value for {self.key_name} in {path} and run: invoke signing.check
"""
        return f"""
❌ Release signing key '{self.key_name}' not found in {path}
💡 Add a line '{self.key_name}=...' to {path} and run: invoke signing.check
"""


class MalformedPropertiesError(ConfigException):
    """Raised when a properties file cannot be decoded or contains an invalid escape."""
    def __init__(self, message: str, path: str = None, line_number: int = None, **kwargs):
        self.line_number = line_number
        super().__init__(message, error_type="malformed_properties", path=path, **kwargs)

    def _generate_guidance(self):
        where = self.path or 'properties file'
        if self.line_number:
            where = f"{where} (line {self.line_number})"
        return f"""
❌ Could not read {where}: {self}
💡 The file must be UTF-8 text with one key=value pair per line.
   Unicode escapes must have the form \\uXXXX with four hex digits.
"""


class ReleaseSigningRequiredError(ConfigException):
    """Raised when the release variant is configured without signing credentials."""
    def __init__(self, message: str, variant_name: str = "release", **kwargs):
        super().__init__(message, error_type="release_signing_required", variant_name=variant_name, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Build variant '{self.variant_name}' has no signing configuration
💡 Release artifacts must be signed. Verify your credentials with: invoke signing.check
"""


class InvalidVariantError(ConfigException):
    """Raised when a build variant's flags are inconsistent."""
    def __init__(self, message: str, variant_name: str, **kwargs):
        super().__init__(message, error_type="invalid_variant", variant_name=variant_name, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Build variant '{self.variant_name}' is misconfigured: {self}
💡 Resource shrinking only works together with code minification.
   Enable minify_enabled or disable shrink_resources for '{self.variant_name}' in android.yaml
"""


class KeystoreNotFoundError(ConfigException):
    """Raised when storeFile does not point at an existing keystore."""
    def __init__(self, message: str, path: str, **kwargs):
        super().__init__(message, error_type="keystore_not_found", key_name="storeFile", path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Keystore file not found at {self.path}
💡 storeFile is resolved relative to the app module directory.
   Fix storeFile in key.properties or pass the right directory: {self._get_current_command()} --project-dir=<dir>
"""


class AppConfigError(ConfigException):
    """Raised when android.yaml is unreadable or has invalid values."""
    def __init__(self, message: str, path: str = None, **kwargs):
        super().__init__(message, error_type="app_config", path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Invalid app configuration in {self.path or 'android.yaml'}: {self}
💡 Fix the file and run: invoke show-config
"""
