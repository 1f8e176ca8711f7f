"""
SOLID principle illustrations.

- single_responsibility: SRP
- open_closed: OCP
- liskov_substitution: LSP
- interface_segregation: ISP
- dependency_inversion: DIP
"""
