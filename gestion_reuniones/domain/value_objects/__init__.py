"""
Value Objects del dominio de reuniones.

Este paquete contiene los objetos de valor inmutables que validan los datos
primitivos de una reunión (identificadores, textos, fechas, ubicación, enlace)
y las enumeraciones del dominio.
"""
