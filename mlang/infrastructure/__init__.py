"""Infrastructure layer: operation results and the i18n language cache."""
