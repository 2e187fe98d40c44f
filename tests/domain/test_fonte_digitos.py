# tests/domain/test_fonte_digitos.py
#
# Fonte de digitos pseudo-aleatorios: comprimento, intervalo, uniformidade e
# reprodutibilidade com seed.
from collections import Counter

import pytest

from gerador.domain.documento.fonte_digitos import FonteAleatoria


def test_gera_quantidade_pedida():
    """Devolve exatamente n digitos."""
    fonte = FonteAleatoria()
    assert len(fonte.gerar(9)) == 9
    assert len(fonte.gerar(12)) == 12
    assert len(fonte.gerar(1)) == 1


def test_digitos_entre_zero_e_nove():
    """Todo elemento e um int em [0, 9]."""
    fonte = FonteAleatoria(seed=7)
    digitos = fonte.gerar(2000)
    assert all(isinstance(d, int) and 0 <= d <= 9 for d in digitos)


@pytest.mark.parametrize("seed", [1, 123, 2024])
def test_distribuicao_aproximadamente_uniforme(seed):
    """Em 10 000 sorteios cada digito fica a menos de 20% de n/10."""
    n = 10_000
    contagem = Counter(FonteAleatoria(seed=seed).gerar(n))
    esperado = n / 10
    assert set(contagem) == set(range(10))
    for digito in range(10):
        assert abs(contagem[digito] - esperado) <= 0.2 * esperado, (digito, contagem[digito])


def test_mesma_seed_mesma_sequencia():
    """Seed fixa reproduz a mesma sequencia de chamadas."""
    a = FonteAleatoria(seed=42)
    b = FonteAleatoria(seed=42)
    assert [a.gerar(9) for _ in range(3)] == [b.gerar(9) for _ in range(3)]


def test_chamadas_sucessivas_avancam_a_sequencia():
    fonte = FonteAleatoria(seed=42)
    lotes = [tuple(fonte.gerar(12)) for _ in range(5)]
    assert len(set(lotes)) > 1


@pytest.mark.parametrize("n", [0, -1])
def test_quantidade_nao_positiva_rejeitada(n):
    """n < 1 e violacao de contrato, nao uma lista vazia."""
    with pytest.raises(ValueError, match="positiva"):
        FonteAleatoria().gerar(n)
