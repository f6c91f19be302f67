from abc import ABC, abstractmethod


__all__ = ('ISegment2D', )


class ISegment2D(ABC):
    @abstractmethod
    def xi(self) -> 'Numeric':
        pass

    @abstractmethod
    def yi(self) -> 'Numeric':
        pass

    @abstractmethod
    def xf(self) -> 'Numeric':
        pass

    @abstractmethod
    def yf(self) -> 'Numeric':
        pass
