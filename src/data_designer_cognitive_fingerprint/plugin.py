from data_designer.plugins.plugin import Plugin, PluginType

cognitive_fingerprint_plugin = Plugin(
    config_qualified_name="data_designer_cognitive_fingerprint.config.CognitiveFingerprintColumnConfig",
    impl_qualified_name="data_designer_cognitive_fingerprint.generator.CognitiveFingerprintColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
