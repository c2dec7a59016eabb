"""
Configuration checker script.
Run this to verify the registry and server configuration.
"""
from cacverify.config.settings import settings

print("=" * 60)
print("Configuration Check")
print("=" * 60)

# Registry
print("\n[Registry]")
print(f"  Landing page: {settings.registry_base_url}")
print(f"  Search URL: {settings.registry_search_url}")
print(f"  Search field: {settings.registry_search_field}")
print(f"  Timeout: {settings.registry_timeout}s")
print(f"  User agent: {settings.registry_user_agent[:40]}...")

# Name matching
print("\n[Name Matching]")
print(f"  Legal suffixes: {', '.join(s.strip() for s in settings.legal_suffixes)}")

# Overrides
print("\n[Verification Overrides]")
if settings.enable_verification_overrides and settings.verification_overrides:
    for name, fields in settings.verification_overrides.items():
        print(f"  ✓ {name} -> {fields.get('official_name')} (RC {fields.get('rc_number')})")
else:
    print("  ○ Disabled")

# Check server config
print("\n[Server Configuration]")
print(f"  Host: {settings.host}")
print(f"  Port: {settings.port}")
print(f"  Debug: {settings.debug}")
print(f"  App Name: {settings.app_name}")
print(f"  Version: {settings.app_version}")
print(f"  Log level: {settings.log_level}")
print(f"  Log file: {settings.log_file or '(stderr only)'}")

# Check CORS
print("\n[CORS Configuration]")
print(f"  Allowed Origins: {settings.cors_origins}")

print("\n" + "=" * 60)
print("Configuration Check Complete")
print("=" * 60)
