"""Command that builds a random sample network and reports on it."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from .network import CapacityError, SocialNetwork, UserNotFoundError
from .visualize import write_all

_RENDER_MESSAGES = {
    "ag": "Sosyal ağ görselleştirmesi ag.png dosyasına kaydedildi.",
    "agac": "Kırmızı-Siyah ağaç görselleştirmesi agac.png dosyasına kaydedildi.",
    "topluluklar": "Topluluk görselleştirmesi topluluklar.png dosyasına kaydedildi.",
    "etki": "Etki puanları görselleştirmesi etki.png dosyasına kaydedildi.",
}


def generate_sample(
    network: SocialNetwork, user_count: int, avg_friends: int, rng: random.Random
) -> None:
    """Add users 1..user_count and random friendships between them."""
    for user_id in range(1, user_count + 1):
        network.add_user(user_id, f"Kullanici{user_id}")
    for user_id in range(1, user_count + 1):
        attempts = rng.randrange(avg_friends * 2) + 1
        for _ in range(attempts):
            friend_id = rng.randrange(user_count) + 1
            if friend_id == user_id:
                continue
            try:
                network.add_friendship(user_id, friend_id)
            except CapacityError:
                pass


def format_ranking(network: SocialNetwork, count: int) -> str:
    """Text listing of the most influential users."""
    lines = [f"En etkili {count} kullanıcı:"]
    for rank, user, score in network.most_influential(count):
        if rank == network_len_split(network, rank):
            lines.append("...")
        lines.append(f"{rank}. {user.name} (Etki Puanı: {score:.2f})")
    return "\n".join(lines)


def network_len_split(network: SocialNetwork, rank: int) -> int | None:
    """Rank before which an ellipsis goes, or None when every user is shown."""
    total = len(network)
    return total - 1 if total > 5 else None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Örnek sosyal ağ analizi")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output-dir", default=".")
    args = parser.parse_args(argv)

    directory = Path(args.output_dir)
    rng = random.Random(args.seed)
    network = SocialNetwork()

    print("Örnek veri oluşturuluyor...")
    generate_sample(network, 20, 5, rng)

    dataset = directory / "veriseti.txt"
    try:
        network.save_dataset(dataset)
    except OSError:
        print("Veri seti dosyası oluşturulamadı!")
    else:
        print(f"Veri seti {dataset} dosyasına kaydedildi.")

    print("\n1. İlişki Ağacı ve DFS ile Arkadaş Arama:")
    print("2 mesafedeki arkadaşlar (Kullanici1 için):")
    print(" ".join(user.name for user in network.friends_at_distance(1, 2)))

    print("\n2. Ortak Arkadaş Analizi:")
    print("Kullanici1 ve Kullanici4 arasındaki ortak arkadaşlar:")
    print("Ortak arkadaşlar:")
    print(" ".join(user.name for user in network.common_friends(1, 4)))

    print("\n3. Topluluk Tespiti:")
    communities = network.communities()
    for community in communities:
        names = " ".join(user.name for user in community.members)
        print(f"Topluluk {community.number}: {names}")
    print("\nTopluluk İstatistikleri:")
    for community in communities:
        print(
            f"Topluluk {community.number}: {community.size} kullanıcı, "
            f"ortalama yoğunluk: {community.density:.2f}"
        )

    print("\n4. Etki Alanı Hesaplama:")
    print("Kullanıcı etki puanları:")
    for user_id in range(1, 6):
        try:
            score = network.influence_score(user_id)
        except UserNotFoundError:
            print("Kullanıcı bulunamadı!")
            score = 0.0
        print(f"Kullanici{user_id}'nin etki puanı: {score:.2f}")

    print("\n5. En Etkili Kullanıcılar:")
    print()
    print(format_ranking(network, 5))

    print("\n6. Görselleştirmeler oluşturuluyor...")
    for dot_path, _png_path, rendered in write_all(network, directory):
        if rendered:
            print(_RENDER_MESSAGES[dot_path.stem])
        else:
            print(f"{dot_path.name} dönüştürülemedi.")

    print("\nTüm işlemler tamamlandı!")
    print("Oluşturulan görselleştirmeler:")
    print("- ag.png: Sosyal ağ görselleştirmesi")
    print("- agac.png: Kırmızı-Siyah ağaç görselleştirmesi")
    print("- topluluklar.png: Topluluk görselleştirmesi")
    print("- etki.png: Etki puanları görselleştirmesi")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())