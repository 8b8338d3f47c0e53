"""Row normalization, sheet selection and conversion orchestration."""
