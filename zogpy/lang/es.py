"""Spanish error messages, keyed by schema type and error code."""

from __future__ import annotations

from zogpy.errors import ErrCode, ZogType

MAP: dict[str, dict[str, str]] = {
    ZogType.STRING.value: {
        ErrCode.REQUIRED.value: "Es obligatorio",
        ErrCode.NOT_NIL.value: "No debe estar vacio",
        ErrCode.MIN.value: "Cadena debe contener al menos {{min}} caracter(es)",
        ErrCode.MAX.value: "Cadena debe contener como máximo {{max}} caracter(es)",
        ErrCode.LEN.value: "Cadena debe tener exactamente {{len}} caracter(es)",
        ErrCode.EMAIL.value: "Debe ser un correo electrónico válido",
        ErrCode.UUID.value: "Debe ser un UUID válido",
        ErrCode.MATCH.value: "Cadena no es válida",
        ErrCode.URL.value: "Debe ser una URL válida",
        ErrCode.HAS_PREFIX.value: "Cadena debe comenzar con {{prefix}}",
        ErrCode.HAS_SUFFIX.value: "Cadena debe terminar con {{suffix}}",
        ErrCode.CONTAINS.value: "Cadena debe contener {{contained}}",
        ErrCode.CONTAINS_DIGIT.value: "Cadena debe contener al menos un dígito",
        ErrCode.CONTAINS_UPPER.value: "Cadena debe contener al menos una letra mayúscula",
        ErrCode.CONTAINS_LOWER.value: "Cadena debe contener al menos una letra minúscula",
        ErrCode.CONTAINS_SPECIAL.value: "Cadena debe contener al menos un carácter especial",
        ErrCode.ONE_OF.value: "Cadena debe ser una de las siguientes: {{one_of_options}}",
        ErrCode.FALLBACK.value: "Cadena no es válida",
    },
    ZogType.BOOL.value: {
        ErrCode.REQUIRED.value: "Es obligatorio",
        ErrCode.NOT_NIL.value: "No debe estar vacio",
        ErrCode.TRUE.value: "Debe ser verdadero",
        ErrCode.FALSE.value: "Debe ser falso",
        ErrCode.FALLBACK.value: "Valor no es válido",
    },
    ZogType.NUMBER.value: {
        ErrCode.REQUIRED.value: "Es obligatorio",
        ErrCode.NOT_NIL.value: "No debe estar vacio",
        ErrCode.LTE.value: "Número debe ser menor o igual a {{lte}}",
        ErrCode.LT.value: "Número debe ser menor que {{lt}}",
        ErrCode.GTE.value: "Número debe ser mayor o igual a {{gte}}",
        ErrCode.GT.value: "Número debe ser mayor que {{gt}}",
        ErrCode.EQ.value: "Número debe ser igual a {{eq}}",
        ErrCode.ONE_OF.value: "Número debe ser uno de los siguientes: {{options}}",
        ErrCode.FALLBACK.value: "Número no es válido",
    },
    ZogType.TIME.value: {
        ErrCode.REQUIRED.value: "Es obligatorio",
        ErrCode.NOT_NIL.value: "No debe estar vacio",
        ErrCode.AFTER.value: "Fecha debe ser posterior a {{after}}",
        ErrCode.BEFORE.value: "Fecha debe ser anterior a {{before}}",
        ErrCode.EQ.value: "Fecha debe ser igual a {{eq}}",
        ErrCode.FALLBACK.value: "Fecha no es válida",
    },
    ZogType.SLICE.value: {
        ErrCode.REQUIRED.value: "Es obligatorio",
        ErrCode.NOT_NIL.value: "No debe estar vacio",
        ErrCode.MIN.value: "Lista debe contener al menos {{min}} elementos",
        ErrCode.MAX.value: "Lista debe contener como máximo {{max}} elementos",
        ErrCode.LEN.value: "Lista debe contener exactamente {{len}} elementos",
        ErrCode.CONTAINS.value: "Lista debe contener {{contained}}",
        ErrCode.FALLBACK.value: "Lista no es válida",
    },
    ZogType.STRUCT.value: {
        ErrCode.REQUIRED.value: "Es obligatorio",
        ErrCode.NOT_NIL.value: "No debe estar vacio",
        ErrCode.FALLBACK.value: "Estructura no es válida",
        ErrCode.INVALID_JSON.value: "JSON no válido",
        ErrCode.ZHTTP_INVALID_FORM.value: "Formulario no válido",
        ErrCode.ZHTTP_INVALID_QUERY.value: "Parámetros de consulta no válidos",
    },
}