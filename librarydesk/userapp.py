"""Console walk-through of the user store: add, list, find, delete and update."""

from __future__ import annotations

from typing import Optional, Sequence

from librarydesk.users import User, UserService, print_user, print_users


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the user management demonstration and print each step."""
    print("Chương trình quản lý người dùng")

    service = UserService()
    service.add(User(id=1, name="Nguyễn Văn A", email="nguyenvana@example.com", age=25))
    service.add(User(id=2, name="Trần Thị B", email="tranthib@example.com", age=30))
    service.add(User(id=3, name="Lê Văn C", email="levanc@example.com", age=22))

    print("\nDanh sách tất cả người dùng:")
    print_users(service.get_all())

    print("\nTìm người dùng có ID = 2:")
    user = service.get_by_id(2)
    if user is not None:
        print_user(user)
    else:
        print("Không tìm thấy người dùng!")

    print("\nXóa người dùng có ID = 1")
    service.delete(1)

    print("\nDanh sách sau khi xóa:")
    print_users(service.get_all())

    print("\nCập nhật thông tin người dùng ID = 2:")
    service.update(
        User(id=2, name="Trần Thị B (Đã cập nhật)", email="newemail@example.com", age=31)
    )

    print("\nDanh sách sau khi cập nhật:")
    print_users(service.get_all())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())