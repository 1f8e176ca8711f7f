"""
I - Interface Segregation: clients should not depend on methods they do not use.

A single Machine interface forces a plain printer to stub out scanning
and faxing. Small role interfaces let each device implement only what it
can do, and a multi-function device is assembled by delegation.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger('GoFPatterns.InterfaceSegregation')


@dataclass
class Document:
    name: str


class Machine(ABC):
    """General purpose interface."""

    @abstractmethod
    def print_document(self, document: Document):
        pass

    @abstractmethod
    def scan_document(self, document: Document):
        pass

    @abstractmethod
    def fax_document(self, document: Document):
        pass


class MultiFunctionPrinter(Machine):
    def print_document(self, document: Document):
        print(f"Printing: {document.name}")

    def scan_document(self, document: Document):
        print(f"Scanning: {document.name}")

    def fax_document(self, document: Document):
        print(f"Faxing: {document.name}")


class OldFashionedPrinter(Machine):
    def print_document(self, document: Document):
        print(f"Printing: {document.name}")

    def scan_document(self, document: Document):
        raise NotImplementedError("Printer cannot scan")

    def fax_document(self, document: Document):
        raise NotImplementedError("Printer cannot fax")


class Printer(ABC):
    @abstractmethod
    def print_document(self, document: Document):
        pass


class Scanner(ABC):
    @abstractmethod
    def scan_document(self, document: Document):
        pass


class FaxMachine(ABC):
    @abstractmethod
    def fax_document(self, document: Document):
        pass


class DocumentPrinter(Printer):
    def print_document(self, document: Document):
        print(f"Printing: {document.name}")


class DocumentScanner(Scanner):
    def scan_document(self, document: Document):
        print(f"Scanning: {document.name}")


class DocumentFax(FaxMachine):
    def fax_document(self, document: Document):
        print(f"Faxing: {document.name}")


class MultiFunctionDevice(Printer, Scanner, FaxMachine):
    """Implements every role by delegating to the injected devices."""

    def __init__(self, printer: Printer, scanner: Scanner, fax: FaxMachine):
        self.printer = printer
        self.scanner = scanner
        self.fax = fax

    def print_document(self, document: Document):
        self.printer.print_document(document)

    def scan_document(self, document: Document):
        self.scanner.scan_document(document)

    def fax_document(self, document: Document):
        self.fax.fax_document(document)


def run():
    print("\nInterface Segregation\n")

    doc = Document("Document1")

    # general purpose interface
    mfp = MultiFunctionPrinter()
    mfp.print_document(doc)
    mfp.scan_document(doc)

    old = OldFashionedPrinter()
    old.print_document(doc)
    try:
        old.scan_document(doc)
    except NotImplementedError as e:
        logger.debug("Expected failure: %s", e)
        print(f"Not supported: {e}")

    # segregated interfaces
    device = MultiFunctionDevice(DocumentPrinter(), DocumentScanner(), DocumentFax())
    device.print_document(doc)
    device.scan_document(doc)
    device.fax_document(doc)
