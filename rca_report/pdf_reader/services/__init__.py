"""Services des PDF-Reader Moduls (Parsing, Extraktion, Export)."""
