"""
Sincronizacion one-way: hoja central (Google Apps Script) -> almacen local.

Objetivos de diseño:
- Idempotencia: re-ingerir la tabla completa no genera ids nuevos.
- Sin PK remota: la identidad se resuelve con la clave compuesta
  fecha|alumno|sesion.
- Tolerancia por fila: una fila mal formada se descarta sin abortar el lote.
- La nube manda: tras un sync el estado de validacion es el de la hoja.
- Todo o nada: el almacen local se reemplaza en una sola operacion.
"""
