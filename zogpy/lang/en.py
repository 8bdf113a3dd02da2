"""English error messages, keyed by schema type and error code."""

from __future__ import annotations

from zogpy.errors import ErrCode, ZogType

MAP: dict[str, dict[str, str]] = {
    ZogType.STRING.value: {
        ErrCode.REQUIRED.value: "is required",
        ErrCode.NOT_NIL.value: "must not be empty",
        ErrCode.MIN.value: "string must contain at least {{min}} character(s)",
        ErrCode.MAX.value: "string must contain at most {{max}} character(s)",
        ErrCode.LEN.value: "string must be exactly {{len}} character(s)",
        ErrCode.EMAIL.value: "must be a valid email",
        ErrCode.UUID.value: "must be a valid UUID",
        ErrCode.MATCH.value: "string is invalid",
        ErrCode.URL.value: "must be a valid URL",
        ErrCode.HAS_PREFIX.value: "string must start with {{prefix}}",
        ErrCode.HAS_SUFFIX.value: "string must end with {{suffix}}",
        ErrCode.CONTAINS.value: "string must contain {{contained}}",
        ErrCode.CONTAINS_DIGIT.value: "string must contain at least one digit",
        ErrCode.CONTAINS_UPPER.value: "string must contain at least one uppercase letter",
        ErrCode.CONTAINS_LOWER.value: "string must contain at least one lowercase letter",
        ErrCode.CONTAINS_SPECIAL.value: "string must contain at least one special character",
        ErrCode.ONE_OF.value: "string must be one of {{one_of_options}}",
        ErrCode.FALLBACK.value: "string is invalid",
    },
    ZogType.BOOL.value: {
        ErrCode.REQUIRED.value: "is required",
        ErrCode.NOT_NIL.value: "must not be empty",
        ErrCode.TRUE.value: "must be true",
        ErrCode.FALSE.value: "must be false",
        ErrCode.FALLBACK.value: "value is invalid",
    },
    ZogType.NUMBER.value: {
        ErrCode.REQUIRED.value: "is required",
        ErrCode.NOT_NIL.value: "must not be empty",
        ErrCode.LTE.value: "number must be less than or equal to {{lte}}",
        ErrCode.LT.value: "number must be less than {{lt}}",
        ErrCode.GTE.value: "number must be greater than or equal to {{gte}}",
        ErrCode.GT.value: "number must be greater than {{gt}}",
        ErrCode.EQ.value: "number must be equal to {{eq}}",
        ErrCode.ONE_OF.value: "number must be one of {{options}}",
        ErrCode.FALLBACK.value: "number is invalid",
    },
    ZogType.TIME.value: {
        ErrCode.REQUIRED.value: "is required",
        ErrCode.NOT_NIL.value: "must not be empty",
        ErrCode.AFTER.value: "time must be after {{after}}",
        ErrCode.BEFORE.value: "time must be before {{before}}",
        ErrCode.EQ.value: "time must be equal to {{eq}}",
        ErrCode.FALLBACK.value: "time is invalid",
    },
    ZogType.SLICE.value: {
        ErrCode.REQUIRED.value: "is required",
        ErrCode.NOT_NIL.value: "must not be empty",
        ErrCode.MIN.value: "slice must contain at least {{min}} items",
        ErrCode.MAX.value: "slice must contain at most {{max}} items",
        ErrCode.LEN.value: "slice must contain exactly {{len}} items",
        ErrCode.CONTAINS.value: "slice must contain {{contained}}",
        ErrCode.FALLBACK.value: "slice is invalid",
    },
    ZogType.STRUCT.value: {
        ErrCode.REQUIRED.value: "is required",
        ErrCode.NOT_NIL.value: "must not be empty",
        ErrCode.FALLBACK.value: "struct is invalid",
        ErrCode.INVALID_JSON.value: "invalid json body",
        ErrCode.ZHTTP_INVALID_FORM.value: "invalid form data",
        ErrCode.ZHTTP_INVALID_QUERY.value: "invalid query params",
    },
}